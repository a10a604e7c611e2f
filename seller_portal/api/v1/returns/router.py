"""Returns API router"""

from fastapi import APIRouter, Depends

from seller_portal.api.v1.auth.dependencies import get_seller_remote, get_seller_session
from seller_portal.core.session import SellerSession
from seller_portal.models import ReturnStatus
from seller_portal.remote import RemoteDataClient
from .schemas import (
    RejectReturnRequest,
    ReturnActionResponse,
    ReturnListResponse,
)
from .services import ReturnService

router = APIRouter()

@router.get("/", response_model=ReturnListResponse)
async def list_returns(
    session: SellerSession = Depends(get_seller_session),
    remote: RemoteDataClient = Depends(get_seller_remote)
):
    """Returns for the seller's products"""
    items = await ReturnService(remote).list_returns(session.seller_id)
    return ReturnListResponse(
        items=items,
        total=len(items),
        pending=sum(1 for r in items if r.status == ReturnStatus.PENDING)
    )

@router.post("/{return_id}/approve", response_model=ReturnActionResponse)
async def approve_return(
    return_id: str,
    remote: RemoteDataClient = Depends(get_seller_remote)
):
    """Approve a return"""
    await ReturnService(remote).approve_return(return_id)
    return ReturnActionResponse(id=return_id, status=ReturnStatus.APPROVED)

@router.post("/{return_id}/reject", response_model=ReturnActionResponse)
async def reject_return(
    return_id: str,
    body: RejectReturnRequest,
    remote: RemoteDataClient = Depends(get_seller_remote)
):
    """Reject a return; a reason is required"""
    reason = await ReturnService(remote).reject_return(return_id, body.reason)
    return ReturnActionResponse(
        id=return_id,
        status=ReturnStatus.REJECTED,
        rejection_reason=reason
    )
