"""Identity provider calls (email/password sessions)"""

from typing import Optional, TYPE_CHECKING
import logging

from pydantic import BaseModel
from supabase import AuthApiError

from seller_portal.core.exceptions import UnauthorizedException
from .errors import remote_errors

if TYPE_CHECKING:
    from .client import SupabaseGateway

logger = logging.getLogger(__name__)

# Statuses meaning "no such session" rather than a backend fault
NO_SESSION_STATUSES = {401, 403, 404}
BAD_CREDENTIAL_STATUSES = {400, 401, 422}

class AuthUser(BaseModel):
    """User record issued by the identity provider"""
    id: str
    email: Optional[str] = None

class AuthSession(BaseModel):
    """Tokens returned by a successful sign-in"""
    access_token: str
    refresh_token: Optional[str] = None
    token_type: str = "bearer"
    expires_in: Optional[int] = None
    user: AuthUser

class IdentityClient:
    """Sign-in, user lookup and sign-out"""

    def __init__(self, gateway: "SupabaseGateway"):
        self.gateway = gateway

    async def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        """
        Exchange credentials for a session

        Sign-in stores the session on the client that made it, so each
        sign-in runs on a client of its own and the shared one stays anonymous.

        Raises:
            UnauthorizedException: If the provider rejects the credentials
            RemoteServiceException: On any other provider failure
        """
        client = await self.gateway.connect_client()

        with remote_errors("sign in"):
            try:
                response = await client.auth.sign_in_with_password(
                    {"email": email, "password": password}
                )
            except AuthApiError as e:
                if e.status not in BAD_CREDENTIAL_STATUSES:
                    raise
                logger.info(f"Sign in rejected for {email}: {e.message}")
                raise UnauthorizedException(
                    "Invalid login credentials",
                    error_code="INVALID_CREDENTIALS"
                ) from e

        session = response.session
        if session is None:
            raise UnauthorizedException("Invalid login credentials", error_code="INVALID_CREDENTIALS")

        return AuthSession(
            access_token=session.access_token,
            refresh_token=session.refresh_token,
            token_type=session.token_type or "bearer",
            expires_in=session.expires_in,
            user=AuthUser(id=session.user.id, email=session.user.email),
        )

    async def get_user(self, access_token: str) -> Optional[AuthUser]:
        """User behind a token, or None when the session is absent or expired"""
        with remote_errors("get user"):
            try:
                response = await self.gateway.client.auth.get_user(access_token)
            except AuthApiError as e:
                if e.status not in NO_SESSION_STATUSES:
                    raise
                return None

        if response is None or response.user is None:
            return None
        return AuthUser(id=response.user.id, email=response.user.email)

    async def sign_out(self, access_token: str) -> None:
        """Revoke a session; signing out twice is not an error"""
        with remote_errors("sign out"):
            try:
                await self.gateway.client.auth.admin.sign_out(access_token)
            except AuthApiError as e:
                if e.status not in NO_SESSION_STATUSES:
                    raise
                logger.debug("Sign out for an already closed session")
