"""Products API"""

from .router import router

__all__ = ["router"]
