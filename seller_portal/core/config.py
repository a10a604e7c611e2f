"""
Application configuration management using Pydantic Settings
Handles all environment variables and application settings
"""

from pydantic_settings import BaseSettings
from typing import Optional, List
from functools import lru_cache

class Settings(BaseSettings):
    """Main application settings"""

    # Application Settings
    APP_NAME: str = "Seller Portal API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # Server Settings
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    WORKERS: int = 4

    # Hosted backend (identity, data and object storage)
    SUPABASE_URL: str
    SUPABASE_ANON_KEY: str
    SUPABASE_TIMEOUT: float = 15.0

    # CORS Configuration
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:3000"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: List[str] = ["*"]
    CORS_ALLOW_HEADERS: List[str] = ["*"]

    # Product image uploads
    PRODUCT_IMAGE_BUCKET: str = "product_image"
    PRODUCT_IMAGE_FOLDER: str = "products"
    MAX_IMAGE_SIZE: int = 5 * 1024 * 1024  # 5MB

    # Dashboard
    TOP_PRODUCTS_LIMIT: int = 5

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    LOG_MAX_BYTES: int = 10 * 1024 * 1024
    LOG_BACKUP_COUNT: int = 5

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def supabase_base_url(self) -> str:
        """Project URL without a trailing slash"""
        return self.SUPABASE_URL.rstrip("/")

@lru_cache()
def get_settings() -> Settings:
    """
    Create cached settings instance
    This ensures settings are loaded only once
    """
    return Settings()

# Global settings instance
settings = get_settings()
