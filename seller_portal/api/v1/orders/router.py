"""
Order API routes
"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from seller_portal.api.v1.auth.dependencies import get_seller_remote, get_seller_session
from seller_portal.core.session import SellerSession
from seller_portal.remote import RemoteDataClient
from .schemas import SellerOrder, SellerOrderListResponse
from .services import OrderService, summarize_orders

router = APIRouter()

@router.get(
    "/",
    response_model=SellerOrderListResponse,
    summary="List orders",
    description="Orders that contain the seller's products, with the seller's share"
)
async def list_orders(
    search: Optional[str] = Query(None, description="Order number, customer or product name"),
    status: Optional[str] = Query(None, description="Exact order status"),
    session: SellerSession = Depends(get_seller_session),
    remote: RemoteDataClient = Depends(get_seller_remote)
):
    """List seller orders"""
    orders = await OrderService(remote).list_seller_orders(
        session.seller_id,
        search=search,
        status=status
    )
    revenue, units = summarize_orders(orders)
    return SellerOrderListResponse(
        orders=orders,
        count=len(orders),
        total_revenue=revenue,
        total_items=units
    )

@router.get("/{order_id}", response_model=SellerOrder)
async def get_order(
    order_id: str,
    session: SellerSession = Depends(get_seller_session),
    remote: RemoteDataClient = Depends(get_seller_remote)
):
    """Order detail limited to the seller's items"""
    return await OrderService(remote).get_seller_order(session.seller_id, order_id)
