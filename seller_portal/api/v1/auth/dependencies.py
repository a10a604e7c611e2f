"""
Authentication dependencies
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from seller_portal.core.exceptions import UnauthorizedException
from seller_portal.core.session import SellerSession
from seller_portal.remote import RemoteDataClient, SupabaseGateway, get_supabase
from .services import AuthService

security = HTTPBearer(auto_error=False)

def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> Optional[str]:
    return credentials.credentials if credentials else None

async def get_seller_session(
    token: Optional[str] = Depends(get_bearer_token),
    supabase: SupabaseGateway = Depends(get_supabase)
) -> SellerSession:
    """
    Current seller session (required)
    Raises 401 when the token does not resolve to an active seller
    """
    session = await AuthService(supabase).get_current_seller(token)
    if session is None:
        raise UnauthorizedException("Seller session required")
    return session

def get_seller_remote(
    session: SellerSession = Depends(get_seller_session),
    supabase: SupabaseGateway = Depends(get_supabase)
) -> RemoteDataClient:
    """Remote data client acting as the current seller"""
    return session.data(supabase)
