"""Fixed-window rate limiter with an optional Redis backend.

Without Redis the limiter is per-process: it resets on restart and is not
shared between workers. Set ``RATE_LIMIT_BACKEND=redis`` to share counters.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Dict, Optional

from .config import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateLimitResult:
    allowed: bool
    remaining: int
    reset_at: Optional[float] = None


@dataclass
class _Window:
    count: int
    reset_at: float


# In-memory store: key -> current window
_rate_limit_store: Dict[str, _Window] = {}
_store_lock = threading.Lock()


def reset_rate_limits() -> None:
    """Drop all in-memory windows."""
    with _store_lock:
        _rate_limit_store.clear()


def _check_in_memory(key: str, max_requests: int, window_seconds: float) -> RateLimitResult:
    now = time.time()
    with _store_lock:
        window = _rate_limit_store.get(key)
        if window is None or now > window.reset_at:
            reset_at = now + window_seconds
            _rate_limit_store[key] = _Window(count=1, reset_at=reset_at)
            return RateLimitResult(allowed=True, remaining=max_requests - 1, reset_at=reset_at)

        if window.count >= max_requests:
            return RateLimitResult(allowed=False, remaining=0, reset_at=window.reset_at)

        window.count += 1
        return RateLimitResult(
            allowed=True,
            remaining=max_requests - window.count,
            reset_at=window.reset_at,
        )


def _check_redis(key: str, max_requests: int, window_seconds: float) -> RateLimitResult:
    import redis

    client = redis.from_url(settings.REDIS_URL, socket_connect_timeout=2, socket_timeout=2)
    redis_key = f"{settings.RATE_LIMIT_PREFIX}:{key}"
    ttl_seconds = max(1, int(window_seconds))

    pipe = client.pipeline()
    pipe.incr(redis_key)
    pipe.ttl(redis_key)
    count, ttl = pipe.execute()
    if count == 1 or ttl is None or ttl < 0:
        client.expire(redis_key, ttl_seconds)
        ttl = ttl_seconds

    reset_at = time.time() + ttl
    if count > max_requests:
        return RateLimitResult(allowed=False, remaining=0, reset_at=reset_at)
    return RateLimitResult(allowed=True, remaining=max_requests - count, reset_at=reset_at)


def check_rate_limit(key: str, max_requests: int, window_seconds: float) -> RateLimitResult:
    """Count one hit for ``key`` and report whether it is within the limit."""
    if settings.uses_redis_rate_limit:
        try:
            return _check_redis(key, max_requests, window_seconds)
        except Exception as exc:
            logger.warning("Redis rate limit unavailable, falling back to in-memory: %s", exc)

    return _check_in_memory(key, max_requests, window_seconds)
