"""Review moderation schemas"""

from pydantic import BaseModel, Field
from typing import List, Optional

from seller_portal.models import Review

class ReviewStats(BaseModel):
    """Counts derived from the fetched reviews"""
    total: int = 0
    average_rating: float = 0.0
    positive: int = 0
    awaiting_reply: int = 0

class ReviewListResponse(BaseModel):
    items: List[Review]
    stats: ReviewStats

class ReplyRequest(BaseModel):
    reply: Optional[str] = Field(None, max_length=2000)

class ReplyResponse(BaseModel):
    id: str
    seller_reply: str
