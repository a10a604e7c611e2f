"""
Order schemas for the seller's read-only order view
"""

from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime

from seller_portal.models import DeliverySnapshot, OrderItem

class SellerOrder(BaseModel):
    """The part of a multi-vendor order that belongs to one seller"""
    id: str
    order_number: str
    status: str
    payment_status: Optional[str] = None
    delivery: DeliverySnapshot
    created_at: Optional[datetime] = None
    items: List[OrderItem]
    seller_total: float

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

class SellerOrderListResponse(BaseModel):
    """Filtered orders plus totals over the filtered set"""
    orders: List[SellerOrder]
    count: int
    total_revenue: float
    total_items: int
