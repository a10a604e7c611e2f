"""Products API router"""

from fastapi import APIRouter, Depends, File, UploadFile, status
from typing import List

from seller_portal.api.v1.auth.dependencies import get_seller_remote, get_seller_session
from seller_portal.core.session import SellerSession
from seller_portal.models import Product
from seller_portal.remote import RemoteDataClient
from seller_portal.services.storage import ImageFile, ImageUploadService
from .schemas import (
    ImageUploadResponse,
    ProductCreate,
    ProductDeleteResponse,
    ProductListResponse,
)
from .services import ProductService

router = APIRouter()

@router.get("/", response_model=ProductListResponse)
async def list_products(
    session: SellerSession = Depends(get_seller_session),
    remote: RemoteDataClient = Depends(get_seller_remote)
):
    """List the seller's products, newest first"""
    products = await ProductService(remote).list_own_products(session.seller_id)
    return ProductListResponse(items=products, total=len(products))

@router.post("/", response_model=Product, status_code=status.HTTP_201_CREATED)
async def create_product(
    data: ProductCreate,
    session: SellerSession = Depends(get_seller_session),
    remote: RemoteDataClient = Depends(get_seller_remote)
):
    """Create a product; price is derived from MRP and discount when MRP is set"""
    return await ProductService(remote).create_product(session.seller, data)

@router.post("/images", response_model=ImageUploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_product_images(
    files: List[UploadFile] = File(...),
    remote: RemoteDataClient = Depends(get_seller_remote)
):
    """Upload product images; the first URL is the primary image"""
    images = [
        ImageFile(
            filename=f.filename or "image",
            content_type=f.content_type or "",
            content=await f.read()
        )
        for f in files
    ]
    urls = await ImageUploadService(remote).upload_product_images(images)
    return ImageUploadResponse(urls=urls, primary_image_url=urls[0] if urls else None)

@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: str,
    session: SellerSession = Depends(get_seller_session),
    remote: RemoteDataClient = Depends(get_seller_remote)
):
    """Get one of the seller's products"""
    return await ProductService(remote).get_product(session.seller_id, product_id)

@router.put("/{product_id}", response_model=Product)
async def update_product(
    product_id: str,
    data: ProductCreate,
    session: SellerSession = Depends(get_seller_session),
    remote: RemoteDataClient = Depends(get_seller_remote)
):
    """Replace a product"""
    return await ProductService(remote).update_product(session.seller, product_id, data)

@router.delete("/{product_id}", response_model=ProductDeleteResponse)
async def delete_product(
    product_id: str,
    session: SellerSession = Depends(get_seller_session),
    remote: RemoteDataClient = Depends(get_seller_remote)
):
    """Delete a product"""
    await ProductService(remote).delete_product(session.seller_id, product_id)
    return ProductDeleteResponse(id=product_id)
