"""Product catalog model"""

from typing import Dict, List, Optional
from datetime import datetime
import enum

from pydantic import BaseModel

from .base import RemoteRecord

class SizeType(str, enum.Enum):
    NONE = "none"
    CLOTHING = "clothing"
    SHOE = "shoe"
    QUANTITY = "quantity"

class ProductColor(BaseModel):
    """Named color swatch as stored on a product row"""
    name: str = ""
    hex: Optional[str] = None

class Product(RemoteRecord):
    """Product owned by one seller"""

    id: str
    name: str
    description: Optional[str] = None
    price: float = 0
    mrp: Optional[float] = None
    discount_percent: float = 0
    category: Optional[str] = None
    image_url: Optional[str] = None
    stock: int = 0
    is_active: bool = True
    seller_id: Optional[str] = None
    seller_name: Optional[str] = None
    created_at: Optional[datetime] = None

    # Presentational attributes
    brand_name: Optional[str] = None
    size_type: SizeType = SizeType.NONE
    sizes: Optional[List[str]] = None
    colors: Optional[List[ProductColor]] = None
    default_color: Optional[str] = None
    images: Optional[List[str]] = None
    highlights: Optional[List[str]] = None
    attributes: Optional[Dict[str, str]] = None

    @property
    def primary_image(self) -> Optional[str]:
        if self.images:
            return self.images[0]
        return self.image_url
