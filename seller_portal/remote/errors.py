"""Translate supabase-py failures into application exceptions"""

from contextlib import contextmanager
from typing import Any, Iterator, Optional
import logging

import httpx
from supabase import AuthError, PostgrestAPIError, StorageException

from seller_portal.core.exceptions import RemoteServiceException

logger = logging.getLogger(__name__)

def _as_status(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None

def _as_code(value: Any) -> Optional[str]:
    return str(value) if value not in (None, "") else None

@contextmanager
def remote_errors(context: str) -> Iterator[None]:
    """
    Re-raise backend library errors as RemoteServiceException

    Application exceptions raised inside the block pass through untouched.

    Args:
        context: Short description of the call, used in logs and the message
    """
    try:
        yield
    except PostgrestAPIError as e:
        message = e.message or "request failed"
        logger.error(f"{context} failed with code {e.code}: {message}")
        raise RemoteServiceException(
            detail=f"{context}: {message}",
            remote_code=_as_code(e.code)
        ) from e
    except AuthError as e:
        status = _as_status(getattr(e, "status", None))
        logger.error(f"{context} failed with {status}: {e.message}")
        raise RemoteServiceException(
            detail=f"{context}: {e.message}",
            remote_status=status,
            remote_code=_as_code(e.code)
        ) from e
    except StorageException as e:
        message = getattr(e, "message", None) or str(e)
        status = _as_status(getattr(e, "status", None))
        logger.error(f"{context} failed with {status}: {message}")
        raise RemoteServiceException(
            detail=f"{context}: {message}",
            remote_status=status,
            remote_code=_as_code(getattr(e, "code", None))
        ) from e
    except httpx.HTTPError as e:
        logger.error(f"{context} failed: {str(e)}")
        raise RemoteServiceException("Remote service unavailable") from e
