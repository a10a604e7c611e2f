"""
Custom exception classes and error handlers
Provides consistent error responses across the application
"""

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)

class SellerPortalException(HTTPException):
    """Base exception class for the seller portal"""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code

class BadRequestException(SellerPortalException):
    """400 Bad Request"""

    def __init__(self, detail: str, error_code: str = "BAD_REQUEST"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            error_code=error_code
        )

class UnauthorizedException(SellerPortalException):
    """401 Unauthorized"""

    def __init__(self, detail: str = "Unauthorized", error_code: str = "UNAUTHORIZED"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            error_code=error_code,
            headers={"WWW-Authenticate": "Bearer"}
        )

class ForbiddenException(SellerPortalException):
    """403 Forbidden"""

    def __init__(self, detail: str = "Forbidden", error_code: str = "FORBIDDEN"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
            error_code=error_code
        )

class NotFoundException(SellerPortalException):
    """404 Not Found"""

    def __init__(self, detail: str = "Not found", error_code: str = "NOT_FOUND"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            error_code=error_code
        )

class ConflictException(SellerPortalException):
    """409 Conflict"""

    def __init__(self, detail: str, error_code: str = "CONFLICT"):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
            error_code=error_code
        )

class ValidationException(SellerPortalException):
    """422 Unprocessable Entity"""

    def __init__(self, detail: str, error_code: str = "VALIDATION_ERROR"):
        super().__init__(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=detail,
            error_code=error_code
        )

class RemoteServiceException(SellerPortalException):
    """502 Bad Gateway - the hosted backend rejected or failed a call"""

    def __init__(
        self,
        detail: str = "Remote service error",
        error_code: str = "REMOTE_ERROR",
        remote_status: Optional[int] = None,
        remote_code: Optional[str] = None,
    ):
        super().__init__(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=detail,
            error_code=error_code
        )
        self.remote_status = remote_status
        self.remote_code = remote_code

# Business logic exceptions
class NotASellerException(ForbiddenException):
    """Authenticated user has no seller profile"""

    def __init__(self):
        super().__init__(
            detail="You are not registered as a seller. Please contact admin.",
            error_code="NOT_A_SELLER"
        )

class AccountInactiveException(ForbiddenException):
    """Seller profile exists but is deactivated"""

    def __init__(self):
        super().__init__(
            detail="Your seller account is not active. Please contact admin.",
            error_code="ACCOUNT_INACTIVE"
        )

class ReplyAlreadyExistsException(ConflictException):
    """Review already carries a seller reply"""

    def __init__(self, review_id: str):
        super().__init__(
            detail=f"Review {review_id} already has a seller reply",
            error_code="REPLY_ALREADY_EXISTS"
        )

async def seller_portal_exception_handler(
    request: Request,
    exc: SellerPortalException
) -> JSONResponse:
    """Render application exceptions as {"error": ..., "error_code": ...}"""
    if exc.status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc.detail} "
            f"Request ID: {getattr(request.state, 'request_id', 'N/A')}"
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.detail,
            "error_code": exc.error_code,
        },
        headers=exc.headers
    )
