"""Returns API"""

from .router import router

__all__ = ["router"]
