"""
Product service layer
Handles CRUD over the seller's own products
"""

from typing import Any, Dict, List, Optional
import logging

from seller_portal.core.exceptions import NotFoundException
from seller_portal.models import Product, Seller, SizeType
from seller_portal.remote import RemoteDataClient
from seller_portal.services.pricing import compute_selling_price
from .schemas import AttributeEntry, ProductCreate

logger = logging.getLogger(__name__)

def _clean_list(values: List[str]) -> List[str]:
    return [v.strip() for v in values if v and v.strip()]

def normalize_attributes(entries: List[AttributeEntry]) -> Optional[Dict[str, str]]:
    """Turn form rows into a key/value map, dropping blank keys or values"""
    attributes: Dict[str, str] = {}
    for entry in entries:
        key, value = entry.key.strip(), entry.value.strip()
        if key and value:
            attributes[key] = value
    return attributes or None

def build_product_row(seller: Seller, data: ProductCreate) -> Dict[str, Any]:
    """
    Shape a product form into a products row

    Args:
        seller: Owning seller
        data: Submitted product

    Returns:
        Column values for insert/update
    """
    images = _clean_list(data.images)
    highlights = _clean_list(data.highlights)
    sizes = [] if data.size_type == SizeType.NONE else _clean_list(data.sizes)

    return {
        "name": data.name.strip(),
        "description": data.description or None,
        "price": compute_selling_price(data.mrp, data.discount_percent, data.price),
        "mrp": data.mrp or None,
        "discount_percent": data.discount_percent,
        "category": data.category or None,
        "image_url": images[0] if images else (data.image_url or None),
        "stock": data.stock,
        "is_active": data.is_active,
        "brand_name": data.brand_name or None,
        "size_type": data.size_type.value,
        "sizes": sizes,
        "colors": [c.model_dump() for c in data.colors],
        "default_color": data.default_color or None,
        "images": images or None,
        "highlights": highlights or None,
        "attributes": normalize_attributes(data.attributes),
        "seller_id": seller.id,
        "seller_name": seller.store_name,
    }

class ProductService:
    """Product catalog for one seller"""

    def __init__(self, remote: RemoteDataClient):
        self.remote = remote

    async def list_own_products(self, seller_id: str) -> List[Product]:
        """All of the seller's products, newest first"""
        rows = await self.remote.execute(
            self.remote.table("products")
            .select("*")
            .eq("seller_id", seller_id)
            .order("created_at", desc=True),
            "list products"
        )
        return [Product(**row) for row in rows]

    async def get_product(self, seller_id: str, product_id: str) -> Product:
        """
        Get one of the seller's products

        Raises:
            NotFoundException: If the product does not exist or is not theirs
        """
        row = await self.remote.first(
            self.remote.table("products")
            .select("*")
            .eq("id", product_id)
            .eq("seller_id", seller_id),
            "get product"
        )
        if not row:
            raise NotFoundException(f"Product {product_id} not found")
        return Product(**row)

    async def create_product(self, seller: Seller, data: ProductCreate) -> Product:
        """Create product owned by the seller"""
        rows = await self.remote.execute(
            self.remote.table("products").insert([build_product_row(seller, data)]),
            "create product"
        )
        product = Product(**rows[0])
        logger.info(f"Seller {seller.id} created product {product.id}")
        return product

    async def update_product(
        self,
        seller: Seller,
        product_id: str,
        data: ProductCreate
    ) -> Product:
        """
        Replace a product's fields

        Raises:
            NotFoundException: If no product of this seller has that id
        """
        rows = await self.remote.execute(
            self.remote.table("products")
            .update(build_product_row(seller, data))
            .eq("id", product_id)
            .eq("seller_id", seller.id),
            "update product"
        )
        if not rows:
            raise NotFoundException(f"Product {product_id} not found")
        logger.info(f"Seller {seller.id} updated product {product_id}")
        return Product(**rows[0])

    async def delete_product(self, seller_id: str, product_id: str) -> None:
        """
        Delete a product

        Raises:
            NotFoundException: If no product of this seller has that id
        """
        rows = await self.remote.execute(
            self.remote.table("products")
            .delete()
            .eq("id", product_id)
            .eq("seller_id", seller_id),
            "delete product"
        )
        if not rows:
            raise NotFoundException(f"Product {product_id} not found")
        logger.info(f"Seller {seller_id} deleted product {product_id}")
