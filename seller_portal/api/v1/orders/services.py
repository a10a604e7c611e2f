"""
Order aggregation for one seller

Rebuilds, from flat order_items rows, the subset of each order that belongs
to the seller and computes the seller's share of it.
"""

from typing import Dict, List, Optional, Tuple
import logging

from seller_portal.core.exceptions import NotFoundException
from seller_portal.models import Order, OrderItem
from seller_portal.remote import RemoteDataClient
from seller_portal.services.sales import fetch_seller_sales, group_items_by_order
from .schemas import SellerOrder

logger = logging.getLogger(__name__)

def seller_total(items: List[OrderItem]) -> float:
    """Sum of total_price over the given items only"""
    return sum(item.total_price or 0 for item in items)

def build_seller_orders(
    orders: List[Order],
    items_by_order: Dict[str, List[OrderItem]]
) -> List[SellerOrder]:
    """
    Attach the seller's items to each order header

    The order's own total_amount covers every seller in the order and is not
    used; seller_total only counts the items passed in.
    """
    result = []
    for order in orders:
        items = items_by_order.get(order.id, [])
        result.append(SellerOrder(
            id=order.id,
            order_number=order.order_number,
            status=order.status,
            payment_status=order.payment_status,
            delivery=order.delivery,
            created_at=order.created_at,
            items=items,
            seller_total=seller_total(items),
        ))
    return result

def filter_orders(
    orders: List[SellerOrder],
    search: Optional[str] = None,
    status: Optional[str] = None
) -> List[SellerOrder]:
    """
    Filter by free-text search and exact status

    search matches, case-insensitively, a substring of the order number, the
    delivery name or any item's product name.
    """
    term = (search or "").strip().lower()

    def matches_search(order: SellerOrder) -> bool:
        if not term:
            return True
        if term in order.order_number.lower():
            return True
        if term in (order.delivery.name or "").lower():
            return True
        return any(term in item.product_name.lower() for item in order.items)

    return [
        order for order in orders
        if matches_search(order) and (not status or order.status == status)
    ]

def summarize_orders(orders: List[SellerOrder]) -> Tuple[float, int]:
    """(revenue, units) across the given orders"""
    revenue = sum(order.seller_total for order in orders)
    units = sum(order.item_count for order in orders)
    return revenue, units

class OrderService:
    """Seller-scoped order reporting"""

    def __init__(self, remote: RemoteDataClient):
        self.remote = remote

    async def list_seller_orders(
        self,
        seller_id: str,
        search: Optional[str] = None,
        status: Optional[str] = None
    ) -> List[SellerOrder]:
        """
        Orders containing the seller's products, newest first

        Args:
            seller_id: Seller to report on
            search: Optional free-text filter
            status: Optional exact status filter

        Returns:
            Aggregated orders; empty when the seller has no products or sales
        """
        sales = await fetch_seller_sales(self.remote, seller_id)
        if not sales.orders:
            return []

        orders = build_seller_orders(sales.orders, group_items_by_order(sales.items))
        return filter_orders(orders, search=search, status=status)

    async def get_seller_order(self, seller_id: str, order_id: str) -> SellerOrder:
        """
        One order restricted to the seller's items

        Raises:
            NotFoundException: If the order has none of the seller's items
        """
        for order in await self.list_seller_orders(seller_id):
            if order.id == order_id:
                return order
        raise NotFoundException(f"Order {order_id} not found")
