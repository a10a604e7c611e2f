"""
Seller-scoped sales data

order_items rows carry no seller id, so ownership is traced through
product_id -> products.seller_id: first the seller's product ids, then the
items for those ids, then the order headers those items reference.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
import logging

from seller_portal.models import Order, OrderItem, RemoteRecord
from seller_portal.remote import RemoteDataClient

logger = logging.getLogger(__name__)

class OwnedProduct(RemoteRecord):
    """Minimal product columns needed for sales reporting"""
    id: str
    name: Optional[str] = None
    is_active: bool = True

@dataclass
class SellerSales:
    """Products, line items and order headers visible to one seller"""

    products: List[OwnedProduct] = field(default_factory=list)
    items: List[OrderItem] = field(default_factory=list)
    orders: List[Order] = field(default_factory=list)

    @property
    def product_ids(self) -> List[str]:
        return [p.id for p in self.products]

def group_items_by_order(items: List[OrderItem]) -> Dict[str, List[OrderItem]]:
    """Map order id -> that order's items, keeping item order"""
    grouped: Dict[str, List[OrderItem]] = {}
    for item in items:
        grouped.setdefault(item.order_id, []).append(item)
    return grouped

def unique_order_ids(items: List[OrderItem]) -> List[str]:
    """Distinct order ids in first-seen order"""
    return list(dict.fromkeys(item.order_id for item in items))

async def fetch_seller_sales(remote: RemoteDataClient, seller_id: str) -> SellerSales:
    """
    Fetch everything needed to report on one seller's sales

    Stops early when the seller owns no products or has no sold items; later
    collections are then not queried at all. Any remote failure propagates
    and no partial result is returned.

    Args:
        remote: Data client acting as the seller
        seller_id: Seller whose sales to fetch

    Returns:
        SellerSales
    """
    product_rows = await remote.execute(
        remote.table("products")
        .select("id,name,is_active")
        .eq("seller_id", seller_id),
        "list seller products"
    )
    sales = SellerSales(products=[OwnedProduct(**row) for row in product_rows])

    if not sales.products:
        logger.debug(f"Seller {seller_id} has no products")
        return sales

    item_rows = await remote.execute(
        remote.table("order_items")
        .select("*")
        .in_("product_id", sales.product_ids)
        .order("created_at", desc=True),
        "list order items"
    )
    sales.items = [OrderItem(**row) for row in item_rows]

    if not sales.items:
        return sales

    order_rows = await remote.execute(
        remote.table("orders")
        .select("*")
        .in_("id", unique_order_ids(sales.items))
        .order("created_at", desc=True),
        "list orders"
    )
    sales.orders = [Order(**row) for row in order_rows]

    logger.info(
        f"Seller {seller_id}: {len(sales.products)} products, "
        f"{len(sales.items)} items, {len(sales.orders)} orders"
    )
    return sales
