"""
Seller session context

A SellerSession is built when a seller signs in (or when a request's bearer
token resolves to an active seller) and is handed explicitly to every
service that acts on the seller's behalf.
"""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from seller_portal.models import Seller

if TYPE_CHECKING:
    from seller_portal.remote import RemoteDataClient, SupabaseGateway

@dataclass
class SellerSession:
    """Authenticated seller plus the tokens that authorize remote calls"""

    user_id: str
    email: str
    access_token: Optional[str]
    seller: Optional[Seller]
    refresh_token: Optional[str] = None
    expires_in: Optional[int] = None

    @property
    def seller_id(self) -> str:
        if self.seller is None:
            raise RuntimeError("Session has no seller")
        return self.seller.id

    def data(self, supabase: "SupabaseGateway") -> "RemoteDataClient":
        """Remote data client acting as this seller"""
        return supabase.data(self.access_token)

    def clear(self) -> None:
        """Drop tokens and seller after sign-out"""
        self.access_token = None
        self.refresh_token = None
        self.expires_in = None
        self.seller = None
