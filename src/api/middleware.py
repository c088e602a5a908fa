"""
slowapi rate limiting, keyed by client address.

Each application gets its own ``Limiter`` built from its ``Settings``;
``SlowAPIMiddleware`` applies ``settings.rate_limit`` to every route.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from src.config import Settings


def create_limiter(settings: Settings) -> Limiter:
    return Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])
