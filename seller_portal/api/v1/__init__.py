"""API v1 routes aggregation"""

from fastapi import APIRouter

from .auth.router import router as auth_router
from .dashboard.router import router as dashboard_router
from .products.router import router as products_router
from .orders.router import router as orders_router
from .returns.router import router as returns_router
from .reviews.router import router as reviews_router

# Create v1 router
api_router = APIRouter()

# Include all routers
api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
api_router.include_router(dashboard_router, prefix="/dashboard", tags=["Dashboard"])
api_router.include_router(products_router, prefix="/products", tags=["Products"])
api_router.include_router(orders_router, prefix="/orders", tags=["Orders"])
api_router.include_router(returns_router, prefix="/returns", tags=["Returns"])
api_router.include_router(reviews_router, prefix="/reviews", tags=["Reviews"])

# Export router
router = api_router
