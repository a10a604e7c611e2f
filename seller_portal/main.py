"""
Main FastAPI application
"""

from fastapi import FastAPI

from seller_portal.core.config import settings
from seller_portal.core.events import lifespan
from seller_portal.core.exceptions import SellerPortalException, seller_portal_exception_handler
from seller_portal.core.middleware import setup_middleware
from seller_portal.api.health import router as health_router
from seller_portal.api.v1 import api_router

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Seller admin API for a multi-vendor marketplace",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan
)

# Setup middleware
setup_middleware(app)

# Error responses
app.add_exception_handler(SellerPortalException, seller_portal_exception_handler)

# Include routers
app.include_router(health_router)
app.include_router(api_router, prefix="/api/v1")

# Root endpoint
@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running",
        "docs": "/api/docs"
    }

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "seller_portal.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        workers=1 if settings.DEBUG else settings.WORKERS
    )
