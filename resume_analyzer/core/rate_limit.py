from __future__ import annotations

from slowapi import Limiter
from slowapi.util import get_remote_address

from resume_analyzer.core.config import settings

# Decorated routes stay decorated; the limiter's enabled flag switches them on and off.
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit],
    enabled=settings.rate_limit_enabled,
)


def analysis_rate_limit():
    """Per-client limit for the analysis endpoint, tighter than the app-wide default."""
    return limiter.limit(settings.analysis_rate_limit)
