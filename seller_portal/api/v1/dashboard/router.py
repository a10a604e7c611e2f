"""Dashboard API router"""

from fastapi import APIRouter, Depends

from seller_portal.api.v1.auth.dependencies import get_seller_remote, get_seller_session
from seller_portal.core.session import SellerSession
from seller_portal.remote import RemoteDataClient
from .schemas import DashboardSummary
from .services import DashboardService

router = APIRouter()

@router.get("/", response_model=DashboardSummary)
async def get_dashboard(
    session: SellerSession = Depends(get_seller_session),
    remote: RemoteDataClient = Depends(get_seller_remote)
):
    """Seller dashboard statistics"""
    return await DashboardService(remote).get_summary(session.seller_id)
