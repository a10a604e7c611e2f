"""
Authentication API routes
"""

from typing import Optional
from fastapi import APIRouter, Depends, status
import logging

from seller_portal.core.session import SellerSession
from seller_portal.remote import SupabaseGateway, get_supabase
from .dependencies import get_bearer_token, get_seller_session
from .schemas import LoginRequest, MessageResponse, SellerUserResponse, TokenResponse
from .services import AuthService

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post(
    "/login",
    response_model=TokenResponse,
    status_code=status.HTTP_200_OK,
    summary="Seller sign in"
)
async def login(
    body: LoginRequest,
    supabase: SupabaseGateway = Depends(get_supabase)
):
    """Sign in with email and password; only active sellers get a session"""
    session = await AuthService(supabase).sign_in(body.email, body.password)
    return TokenResponse(
        id=session.user_id,
        email=session.email,
        seller=session.seller,
        access_token=session.access_token,
        refresh_token=session.refresh_token,
        expires_in=session.expires_in,
    )

@router.post("/logout", response_model=MessageResponse)
async def logout(
    token: Optional[str] = Depends(get_bearer_token),
    supabase: SupabaseGateway = Depends(get_supabase)
):
    """Sign out; succeeds even without a live session"""
    await AuthService(supabase).sign_out(token)
    return MessageResponse(message="Signed out")

@router.get("/me", response_model=SellerUserResponse)
async def get_me(session: SellerSession = Depends(get_seller_session)):
    """Current seller"""
    return SellerUserResponse(
        id=session.user_id,
        email=session.email,
        seller=session.seller,
    )
