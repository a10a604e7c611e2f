"""Order header and line item models

Both carry snapshot columns frozen at checkout. They are displayed as stored
and never refreshed from live product or address rows.
"""

from typing import Optional
from datetime import datetime
import enum

from pydantic import BaseModel

from .base import RemoteRecord

class OrderStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

class DeliverySnapshot(BaseModel):
    """Delivery address as it was when the order was placed"""
    name: str
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pincode: Optional[str] = None

class Order(RemoteRecord):
    """Order header; may contain items from several sellers"""

    id: str
    order_number: str
    user_id: Optional[str] = None
    status: str = OrderStatus.PENDING.value
    payment_method: Optional[str] = None
    payment_status: Optional[str] = None

    # Delivery snapshot
    delivery_name: str = ""
    delivery_phone: Optional[str] = None
    delivery_address: Optional[str] = None
    delivery_city: Optional[str] = None
    delivery_state: Optional[str] = None
    delivery_pincode: Optional[str] = None

    # Platform-wide totals (all sellers)
    subtotal: Optional[float] = None
    discount_amount: Optional[float] = None
    delivery_charge: Optional[float] = None
    total_amount: Optional[float] = None

    created_at: Optional[datetime] = None

    @property
    def delivery(self) -> DeliverySnapshot:
        return DeliverySnapshot(
            name=self.delivery_name,
            phone=self.delivery_phone,
            address=self.delivery_address,
            city=self.delivery_city,
            state=self.delivery_state,
            pincode=self.delivery_pincode,
        )

class OrderItem(RemoteRecord):
    """One product line within an order; the unit of seller revenue"""

    id: str
    order_id: str
    product_id: Optional[str] = None

    # Product snapshot
    product_name: str
    product_brand: Optional[str] = None
    product_image: Optional[str] = None
    size_label: Optional[str] = None
    color_name: Optional[str] = None
    color_hex: Optional[str] = None

    unit_price: float = 0
    quantity: int = 1
    total_price: float = 0
    created_at: Optional[datetime] = None
