"""Row models for the hosted backend's collections"""

from .base import RemoteRecord
from .seller import Seller
from .product import Product, ProductColor, SizeType
from .order import DeliverySnapshot, Order, OrderItem, OrderStatus
from .returns import ReturnRequest, ReturnStatus
from .review import Review

__all__ = [
    "RemoteRecord",
    "Seller",
    "Product",
    "ProductColor",
    "SizeType",
    "DeliverySnapshot",
    "Order",
    "OrderItem",
    "OrderStatus",
    "ReturnRequest",
    "ReturnStatus",
    "Review",
]
