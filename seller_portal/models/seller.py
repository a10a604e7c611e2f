"""Seller profile model"""

from typing import Optional
from datetime import datetime

from .base import RemoteRecord

class Seller(RemoteRecord):
    """Store account linked to one identity-provider user"""

    id: str
    user_id: str
    store_name: str
    store_description: Optional[str] = None
    logo_url: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    business_address: Optional[str] = None
    is_active: bool = False
    is_verified: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
