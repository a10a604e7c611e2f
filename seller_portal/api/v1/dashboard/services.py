"""Seller dashboard aggregation"""

from typing import Dict, List, Optional
from datetime import datetime, timezone
import logging

from seller_portal.api.v1.orders.services import build_seller_orders
from seller_portal.core.config import settings
from seller_portal.models import OrderItem, OrderStatus
from seller_portal.remote import RemoteDataClient
from seller_portal.services.sales import fetch_seller_sales, group_items_by_order
from .schemas import DashboardSummary, TopProduct

logger = logging.getLogger(__name__)

def start_of_month(now: Optional[datetime] = None) -> datetime:
    """
    First instant of now's calendar month

    A naive or missing now is taken as local time.
    """
    if now is None:
        now = datetime.now().astimezone()
    elif now.tzinfo is None:
        now = now.astimezone()
    return now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)

def _as_aware(value: datetime) -> datetime:
    # Backend timestamps without an offset are UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value

def top_products(items: List[OrderItem], limit: int) -> List[TopProduct]:
    """
    Rank products by revenue from the seller's order items

    Names come from the order item snapshot, newest item first.
    """
    ranked: Dict[str, TopProduct] = {}
    for item in items:
        if not item.product_id:
            continue
        entry = ranked.get(item.product_id)
        if entry is None:
            entry = ranked[item.product_id] = TopProduct(
                product_id=item.product_id,
                product_name=item.product_name,
                units_sold=0,
                revenue=0.0,
            )
        entry.units_sold += item.quantity
        entry.revenue += item.total_price or 0

    return sorted(ranked.values(), key=lambda p: p.revenue, reverse=True)[:limit]

class DashboardService:
    """Summary statistics recomputed from scratch on every call"""

    def __init__(self, remote: RemoteDataClient):
        self.remote = remote

    async def get_summary(
        self,
        seller_id: str,
        now: Optional[datetime] = None
    ) -> DashboardSummary:
        """
        Product, order and revenue figures for one seller

        Args:
            seller_id: Seller to summarize
            now: Reference time for "this month" (defaults to local now)

        Returns:
            DashboardSummary
        """
        sales = await fetch_seller_sales(self.remote, seller_id)
        month_start = start_of_month(now)

        orders = build_seller_orders(sales.orders, group_items_by_order(sales.items))
        monthly = [
            o for o in orders
            if o.created_at is not None and _as_aware(o.created_at) >= month_start
        ]

        summary = DashboardSummary(
            total_products=len(sales.products),
            active_products=sum(1 for p in sales.products if p.is_active),
            total_orders=len(orders),
            pending_orders=sum(1 for o in orders if o.status == OrderStatus.PENDING.value),
            total_revenue=sum(o.seller_total for o in orders),
            monthly_revenue=sum(o.seller_total for o in monthly),
            month_start=month_start,
            top_products=top_products(sales.items, settings.TOP_PRODUCTS_LIMIT),
        )
        logger.debug(f"Dashboard for seller {seller_id}: {summary.total_orders} orders")
        return summary
