"""Health check endpoints"""

from fastapi import APIRouter, Depends
from typing import Any, Dict
from datetime import datetime, timezone

from seller_portal.core.config import settings
from seller_portal.remote import SupabaseGateway, get_supabase

router = APIRouter()

@router.get("/health")
async def health_check():
    """Basic health check"""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

@router.get("/health/detailed")
async def detailed_health_check(
    supabase: SupabaseGateway = Depends(get_supabase)
) -> Dict[str, Any]:
    """Health check including reachability of the hosted backend"""
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "components": {}
    }

    try:
        response = await supabase.http.get(
            f"{supabase.url}/auth/v1/health",
            headers={"apikey": supabase.anon_key}
        )
        healthy = response.is_success
        health_status["components"]["backend"] = {
            "status": "healthy" if healthy else "unhealthy",
            "status_code": response.status_code
        }
    except Exception as e:
        healthy = False
        health_status["components"]["backend"] = {
            "status": "unhealthy",
            "error": str(e)
        }

    if not healthy:
        health_status["status"] = "degraded"

    return health_status
