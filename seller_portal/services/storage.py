"""
Product image uploads to the backend's object storage
"""

from dataclasses import dataclass
from typing import List, Optional
import asyncio
import logging
import secrets
import time

from seller_portal.core.config import settings
from seller_portal.core.exceptions import BadRequestException, ValidationException
from seller_portal.remote import RemoteDataClient

logger = logging.getLogger(__name__)

@dataclass
class ImageFile:
    """Image selected for upload"""

    filename: str
    content_type: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def extension(self) -> str:
        if "." in self.filename:
            return self.filename.rsplit(".", 1)[-1].lower()
        return self.content_type.split("/")[-1].lower()

class ImageUploadService:
    """Validate and upload product images"""

    def __init__(
        self,
        remote: RemoteDataClient,
        bucket: Optional[str] = None,
        folder: Optional[str] = None,
        max_size: Optional[int] = None
    ):
        self.remote = remote
        self.bucket = bucket or settings.PRODUCT_IMAGE_BUCKET
        self.folder = folder or settings.PRODUCT_IMAGE_FOLDER
        self.max_size = max_size or settings.MAX_IMAGE_SIZE

    def validate_image(self, image: ImageFile) -> None:
        """
        Reject non-image files and files over the size limit

        Raises:
            ValidationException: If the file cannot be uploaded
        """
        if not (image.content_type or "").startswith("image/"):
            raise ValidationException(
                f"{image.filename}: please select only image files",
                error_code="INVALID_IMAGE_TYPE"
            )
        if image.size > self.max_size:
            limit_mb = self.max_size // (1024 * 1024)
            raise ValidationException(
                f"{image.filename}: each image must be less than {limit_mb}MB",
                error_code="IMAGE_TOO_LARGE"
            )

    def build_object_path(self, image: ImageFile) -> str:
        """Randomized storage path so uploads never collide"""
        stamp = int(time.time() * 1000)
        return f"{self.folder}/{stamp}-{secrets.token_hex(4)}.{image.extension}"

    async def upload_image(self, image: ImageFile) -> str:
        """Upload one image and return its public URL"""
        path = self.build_object_path(image)
        url = await self.remote.upload_file(
            self.bucket,
            path,
            image.content,
            image.content_type
        )
        logger.info(f"Uploaded {image.filename} ({image.size} bytes) to {path}")
        return url

    async def upload_product_images(self, images: List[ImageFile]) -> List[str]:
        """
        Upload a batch of product images

        Every file is validated before anything is sent. Uploads then run
        concurrently and are all awaited; if any failed the first failure is
        raised. Files that did upload stay in storage.

        Args:
            images: Files in display order

        Returns:
            Public URLs in the same order; the first is the primary image
        """
        if not images:
            raise BadRequestException("Select at least one image", error_code="NO_IMAGES")

        for image in images:
            self.validate_image(image)

        results = await asyncio.gather(
            *(self.upload_image(image) for image in images),
            return_exceptions=True
        )

        failures = [r for r in results if isinstance(r, BaseException)]
        if failures:
            logger.error(
                f"{len(failures)} of {len(images)} image uploads failed; "
                f"{len(images) - len(failures)} already stored"
            )
            raise failures[0]

        return list(results)
