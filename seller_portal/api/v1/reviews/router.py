"""Reviews API router"""

from fastapi import APIRouter, Depends

from seller_portal.api.v1.auth.dependencies import get_seller_remote, get_seller_session
from seller_portal.core.session import SellerSession
from seller_portal.remote import RemoteDataClient
from .schemas import ReplyRequest, ReplyResponse, ReviewListResponse
from .services import ReviewService, review_stats

router = APIRouter()

@router.get("/", response_model=ReviewListResponse)
async def list_reviews(
    session: SellerSession = Depends(get_seller_session),
    remote: RemoteDataClient = Depends(get_seller_remote)
):
    """Reviews of the seller's products with summary stats"""
    reviews = await ReviewService(remote).list_reviews(session.seller_id)
    return ReviewListResponse(items=reviews, stats=review_stats(reviews))

@router.post("/{review_id}/reply", response_model=ReplyResponse)
async def reply_to_review(
    review_id: str,
    body: ReplyRequest,
    remote: RemoteDataClient = Depends(get_seller_remote)
):
    """Reply to a review (once)"""
    reply = await ReviewService(remote).reply_to_review(review_id, body.reply)
    return ReplyResponse(id=review_id, seller_reply=reply)
