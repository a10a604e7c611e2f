"""
Authentication schemas for request/response validation
"""

from pydantic import BaseModel, EmailStr, Field
from typing import Optional

from seller_portal.models import Seller

class LoginRequest(BaseModel):
    """Email/password sign-in"""
    email: EmailStr
    password: str = Field(..., min_length=1)

class SellerUserResponse(BaseModel):
    """Signed-in user and their seller profile"""
    id: str
    email: str
    seller: Seller

class TokenResponse(SellerUserResponse):
    """Session issued at sign-in"""
    access_token: str
    refresh_token: Optional[str] = None
    token_type: str = "bearer"
    expires_in: Optional[int] = None

class MessageResponse(BaseModel):
    message: str
