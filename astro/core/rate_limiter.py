"""
In-memory request throttling for the auth endpoints.

Counters live on the app instance and use fixed windows. Clients are told
apart by the socket peer address; ``X-Forwarded-For`` is only honoured when
the deployment declares a trusted reverse proxy.
"""
from __future__ import annotations

import threading
import time
from typing import Callable, Dict, Tuple

from fastapi import Request

from astro.core.errors import RateLimitError

# key -> (hits in the current window, window end)
_Window = Tuple[int, float]


class RateLimiter:
    def __init__(
        self,
        *,
        enabled: bool = True,
        trust_proxy_headers: bool = False,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.enabled = enabled
        self.trust_proxy_headers = trust_proxy_headers
        self._clock = clock
        self._windows: Dict[str, _Window] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._windows)

    def client_address(self, request: Request) -> str:
        if self.trust_proxy_headers:
            forwarded = (request.headers.get("x-forwarded-for") or "").split(",")[0].strip()
            if forwarded:
                return forwarded
        if request.client and request.client.host:
            return request.client.host
        return "unknown"

    def _evict_expired(self, now: float) -> None:
        stale = [key for key, (_hits, ends_at) in self._windows.items() if ends_at <= now]
        for key in stale:
            del self._windows[key]

    def check(self, key: str, limit: int, window_seconds: int) -> None:
        """Count one hit for ``key``; raise RateLimitError past ``limit`` in the window."""
        if not self.enabled:
            return
        now = self._clock()
        with self._lock:
            self._evict_expired(now)
            hits, ends_at = self._windows.get(key, (0, now + window_seconds))
            hits += 1
            self._windows[key] = (hits, ends_at)
        if hits > limit:
            raise RateLimitError()


def rate_limit_ip(request: Request, scope: str, *, limit: int, window_seconds: int) -> None:
    limiter: RateLimiter | None = getattr(request.app.state, "rate_limiter", None)
    if limiter is None:
        return
    limiter.check(f"{scope}:{limiter.client_address(request)}", limit, window_seconds)
