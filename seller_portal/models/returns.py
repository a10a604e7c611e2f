"""Return request model"""

from typing import Optional
from datetime import datetime
import enum

from pydantic import BaseModel

from .base import RemoteRecord

class ReturnStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

class ReturnProductRef(BaseModel):
    name: Optional[str] = None
    seller_id: Optional[str] = None

class ReturnOrderItemRef(BaseModel):
    product_id: Optional[str] = None
    products: Optional[ReturnProductRef] = None

class ReturnRequest(RemoteRecord):
    """Buyer request to return one order item"""

    id: str
    order_id: Optional[str] = None
    order_item_id: Optional[str] = None
    reason: Optional[str] = None
    status: ReturnStatus = ReturnStatus.PENDING
    rejection_reason: Optional[str] = None
    created_at: Optional[datetime] = None

    # Embedded by the seller-scoped join
    order_items: Optional[ReturnOrderItemRef] = None
