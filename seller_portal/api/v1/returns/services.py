"""
Return moderation service
"""

from typing import List, Optional
import logging

from seller_portal.core.exceptions import ValidationException
from seller_portal.models import ReturnRequest, ReturnStatus
from seller_portal.remote import RemoteDataClient
from .schemas import ReturnResponse

logger = logging.getLogger(__name__)

SELLER_RETURNS_SELECT = "*,order_items!inner(product_id,products!inner(seller_id,name))"

def to_response(record: ReturnRequest) -> ReturnResponse:
    item = record.order_items
    product = item.products if item else None
    return ReturnResponse(
        id=record.id,
        order_id=record.order_id,
        order_item_id=record.order_item_id,
        product_id=item.product_id if item else None,
        product_name=(product.name if product and product.name else "Unknown Product"),
        reason=record.reason,
        status=record.status,
        rejection_reason=record.rejection_reason,
        created_at=record.created_at,
    )

class ReturnService:
    """List, approve and reject returns of the seller's products"""

    def __init__(self, remote: RemoteDataClient):
        self.remote = remote

    async def list_returns(self, seller_id: str) -> List[ReturnResponse]:
        """Returns whose order item is one of the seller's products, newest first"""
        rows = await self.remote.execute(
            self.remote.table("returns")
            .select(SELLER_RETURNS_SELECT)
            .eq("order_items.products.seller_id", seller_id)
            .order("created_at", desc=True),
            "list returns"
        )
        return [to_response(ReturnRequest(**row)) for row in rows]

    async def approve_return(self, return_id: str) -> None:
        """
        Mark a return approved

        Repeating the call for the same id is harmless.
        """
        await self.remote.execute(
            self.remote.table("returns")
            .update({"status": ReturnStatus.APPROVED.value})
            .eq("id", return_id),
            "approve return"
        )
        logger.info(f"Return {return_id} approved")

    async def reject_return(self, return_id: str, reason: Optional[str]) -> str:
        """
        Mark a return rejected with the operator's reason

        A blank or missing reason aborts before anything is sent.

        Returns:
            The stored reason

        Raises:
            ValidationException: If no reason was given
        """
        reason = (reason or "").strip()
        if not reason:
            raise ValidationException(
                "A reason is required to reject a return",
                error_code="REJECTION_REASON_REQUIRED"
            )

        await self.remote.execute(
            self.remote.table("returns")
            .update({"status": ReturnStatus.REJECTED.value, "rejection_reason": reason})
            .eq("id", return_id),
            "reject return"
        )
        logger.info(f"Return {return_id} rejected")
        return reason
