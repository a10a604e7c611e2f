"""
Review moderation service
"""

from typing import List, Optional
import logging

from seller_portal.core.exceptions import ReplyAlreadyExistsException, ValidationException
from seller_portal.models import Review
from seller_portal.remote import RemoteDataClient
from .schemas import ReviewStats

logger = logging.getLogger(__name__)

SELLER_REVIEWS_SELECT = "*,products!inner(name,image_url,seller_id)"

def review_stats(reviews: List[Review]) -> ReviewStats:
    """Average rating, positive (4+) and unanswered counts"""
    if not reviews:
        return ReviewStats()

    average = sum(r.rating for r in reviews) / len(reviews)
    return ReviewStats(
        total=len(reviews),
        average_rating=round(average, 1),
        positive=sum(1 for r in reviews if r.rating >= 4),
        awaiting_reply=sum(1 for r in reviews if not r.seller_reply),
    )

class ReviewService:
    """List reviews of the seller's products and post replies"""

    def __init__(self, remote: RemoteDataClient):
        self.remote = remote

    async def list_reviews(self, seller_id: str) -> List[Review]:
        rows = await self.remote.execute(
            self.remote.table("reviews")
            .select(SELLER_REVIEWS_SELECT)
            .eq("products.seller_id", seller_id)
            .order("created_at", desc=True),
            "list reviews"
        )
        return [Review(**row) for row in rows]

    async def reply_to_review(self, review_id: str, reply: Optional[str]) -> str:
        """
        Attach the seller's reply to a review

        A review takes one reply; the update only matches rows whose
        seller_reply is still empty.

        Returns:
            The stored reply

        Raises:
            ValidationException: If the reply is blank
            ReplyAlreadyExistsException: If the review already has a reply
        """
        reply = (reply or "").strip()
        if not reply:
            raise ValidationException("Reply cannot be empty", error_code="EMPTY_REPLY")

        rows = await self.remote.execute(
            self.remote.table("reviews")
            .update({"seller_reply": reply})
            .eq("id", review_id)
            .is_("seller_reply", None),
            "reply to review"
        )
        if not rows:
            raise ReplyAlreadyExistsException(review_id)

        logger.info(f"Seller replied to review {review_id}")
        return reply
