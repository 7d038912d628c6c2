from slowapi import Limiter
from slowapi.util import get_remote_address

from foodsupply.config.settings import settings

limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])


def auth_rate_limit() -> str:
    # read on every request so the configured limit can change at runtime
    return settings.rate_limit
