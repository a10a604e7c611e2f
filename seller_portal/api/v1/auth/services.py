"""
Authentication service layer
Resolves identity-provider sessions to active sellers
"""

from typing import Optional, Union
import logging

from seller_portal.core.exceptions import (
    AccountInactiveException,
    NotASellerException,
    RemoteServiceException,
)
from seller_portal.core.session import SellerSession
from seller_portal.models import Seller
from seller_portal.remote import RemoteDataClient, SupabaseGateway

logger = logging.getLogger(__name__)

class AuthService:
    """Seller sign-in, session resolution and sign-out"""

    def __init__(self, supabase: SupabaseGateway):
        self.supabase = supabase

    async def _fetch_seller(self, remote: RemoteDataClient, user_id: str) -> Optional[Seller]:
        row = await remote.first(
            remote.table("sellers").select("*").eq("user_id", user_id),
            "get seller"
        )
        return Seller(**row) if row else None

    async def _revoke(self, token: str) -> None:
        """Tear down a refused session; a failed sign-out is logged, not raised"""
        try:
            await self.supabase.auth.sign_out(token)
        except RemoteServiceException as e:
            logger.error(f"Could not revoke refused session: {e.detail}")

    async def sign_in(self, email: str, password: str) -> SellerSession:
        """
        Authenticate a seller

        The provider session is torn down before any authorization error is
        raised, so a user who is not an active seller never keeps a session.
        If that sign-out itself fails the authorization error still wins.

        Args:
            email: Account email
            password: Account password

        Returns:
            SellerSession for the signed-in seller

        Raises:
            UnauthorizedException: Bad credentials
            NotASellerException: No seller profile for this user
            AccountInactiveException: Seller profile is deactivated
        """
        auth_session = await self.supabase.auth.sign_in_with_password(email, password)
        token = auth_session.access_token

        try:
            seller = await self._fetch_seller(self.supabase.data(token), auth_session.user.id)
        except Exception:
            await self._revoke(token)
            raise

        if seller is None:
            logger.warning(f"Sign in by non-seller user {auth_session.user.id}")
            await self._revoke(token)
            raise NotASellerException()

        if not seller.is_active:
            logger.warning(f"Sign in by inactive seller {seller.id}")
            await self._revoke(token)
            raise AccountInactiveException()

        logger.info(f"Seller {seller.id} signed in")
        return SellerSession(
            user_id=auth_session.user.id,
            email=auth_session.user.email or email,
            access_token=token,
            refresh_token=auth_session.refresh_token,
            expires_in=auth_session.expires_in,
            seller=seller,
        )

    async def get_current_seller(self, access_token: Optional[str]) -> Optional[SellerSession]:
        """
        Resolve a token to an active seller

        Returns None, without raising, when there is no session, no seller
        profile, or the seller is inactive. Only backend faults raise.
        """
        if not access_token:
            return None

        user = await self.supabase.auth.get_user(access_token)
        if user is None:
            return None

        seller = await self._fetch_seller(self.supabase.data(access_token), user.id)
        if seller is None or not seller.is_active:
            return None

        return SellerSession(
            user_id=user.id,
            email=user.email or "",
            access_token=access_token,
            seller=seller,
        )

    async def sign_out(self, session_or_token: Union[SellerSession, str, None]) -> None:
        """End a session; safe to call repeatedly"""
        if isinstance(session_or_token, SellerSession):
            token = session_or_token.access_token
        else:
            token = session_or_token

        if token:
            await self.supabase.auth.sign_out(token)

        if isinstance(session_or_token, SellerSession):
            session_or_token.clear()
