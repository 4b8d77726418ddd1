from __future__ import annotations

from slowapi import Limiter
from slowapi.util import get_remote_address

from wem.core.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def rate_limit(limit: str | None = None):
    """Per-IP limit for a POST route; model-backed routes share RATE_LIMIT."""
    return limiter.limit(limit or settings.rate_limit)
