"""
Product schemas for request/response validation
"""

from pydantic import BaseModel, Field
from typing import List, Optional

from seller_portal.models import Product, SizeType

class AttributeEntry(BaseModel):
    """One free-form key/value attribute row as entered in the form"""
    key: str
    value: str

class ColorEntry(BaseModel):
    """Color swatch as entered in the form"""
    name: str = Field(..., min_length=1)
    hex: str = Field("#000000", pattern=r"^#[0-9a-fA-F]{3}([0-9a-fA-F]{3})?$")

class ProductBase(BaseModel):
    """Base schema for products"""
    name: str = Field(..., min_length=1, max_length=500)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0, description="Used as-is when no MRP is given")
    mrp: Optional[float] = Field(None, ge=0)
    discount_percent: int = Field(0, ge=0, le=100)
    category: Optional[str] = None
    image_url: Optional[str] = None
    stock: int = Field(0, ge=0)
    is_active: bool = True

    # Presentation
    brand_name: Optional[str] = None
    size_type: SizeType = SizeType.NONE
    sizes: List[str] = []
    colors: List[ColorEntry] = []
    default_color: Optional[str] = None
    images: List[str] = []
    highlights: List[str] = []
    attributes: List[AttributeEntry] = []

class ProductCreate(ProductBase):
    """Schema for creating or replacing a product"""
    pass

class ProductListResponse(BaseModel):
    """Seller's catalog, newest first"""
    items: List[Product]
    total: int

class ProductDeleteResponse(BaseModel):
    id: str
    deleted: bool = True

class ImageUploadResponse(BaseModel):
    """Public URLs of uploaded images"""
    urls: List[str]
    primary_image_url: Optional[str] = None
