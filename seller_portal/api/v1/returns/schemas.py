"""Return moderation schemas"""

from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime

from seller_portal.models import ReturnStatus

class ReturnResponse(BaseModel):
    """Return request flattened with the product it concerns"""
    id: str
    order_id: Optional[str] = None
    order_item_id: Optional[str] = None
    product_id: Optional[str] = None
    product_name: str
    reason: Optional[str] = None
    status: ReturnStatus
    rejection_reason: Optional[str] = None
    created_at: Optional[datetime] = None

class ReturnListResponse(BaseModel):
    items: List[ReturnResponse]
    total: int
    pending: int

class RejectReturnRequest(BaseModel):
    reason: Optional[str] = None

class ReturnActionResponse(BaseModel):
    id: str
    status: ReturnStatus
    rejection_reason: Optional[str] = None
