"""Hosted backend client"""

from fastapi import Request

from .auth import AuthSession, AuthUser, IdentityClient
from .client import RemoteDataClient, SupabaseGateway

def get_supabase(request: Request) -> SupabaseGateway:
    """Shared backend gateway created in the application lifespan"""
    return request.app.state.supabase

__all__ = [
    "AuthSession",
    "AuthUser",
    "IdentityClient",
    "RemoteDataClient",
    "SupabaseGateway",
    "get_supabase",
]
