"""
Application lifecycle events
Handles startup and shutdown tasks
"""

from fastapi import FastAPI
import logging
from contextlib import asynccontextmanager

from seller_portal.remote import SupabaseGateway
from .logging import setup_logging
from .config import settings

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager
    Opens the shared backend client on startup and closes it on shutdown
    """
    # Startup
    setup_logging()
    logger.info(f"Starting {settings.APP_NAME} ({settings.ENVIRONMENT})...")

    app.state.supabase = await SupabaseGateway.connect(
        settings.SUPABASE_URL,
        settings.SUPABASE_ANON_KEY,
        timeout=settings.SUPABASE_TIMEOUT
    )
    logger.info(f"Backend client ready for {settings.supabase_base_url}")

    try:
        yield
    finally:
        # Shutdown
        logger.info(f"Shutting down {settings.APP_NAME}...")
        await app.state.supabase.aclose()
        logger.info("Backend client closed")
