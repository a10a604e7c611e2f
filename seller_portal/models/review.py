"""Product review model"""

from typing import List, Optional
from datetime import datetime

from pydantic import BaseModel, Field

from .base import RemoteRecord

class ReviewProductRef(BaseModel):
    name: Optional[str] = None
    image_url: Optional[str] = None
    seller_id: Optional[str] = None

class Review(RemoteRecord):
    """Buyer review; seller_reply is set at most once"""

    id: str
    product_id: str
    user_id: Optional[str] = None
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None
    user_name: Optional[str] = None
    images: Optional[List[str]] = None
    seller_reply: Optional[str] = None
    created_at: Optional[datetime] = None

    # Embedded by the seller-scoped join
    products: Optional[ReviewProductRef] = None
