"""
Per-IP request rate limiting.

In-memory sliding window: each client IP may make max_requests requests per
window_seconds. Excess requests get a 429 failure envelope with Retry-After.
"""

import logging
import time
from collections import defaultdict
from typing import Callable, Dict, List

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from alfa_trading.responses import failure

logger = logging.getLogger(__name__)

_PRUNE_INTERVAL = 3600  # Prune stale IPs every hour


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(
        self,
        app,
        max_requests: int = 100,
        window_seconds: int = 900,
        clock: Callable[[], float] = time.time,
    ):
        super().__init__(app)
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.clock = clock
        # {ip: [timestamp, ...]}
        self._requests: Dict[str, List[float]] = defaultdict(list)
        self._last_prune_time: float = 0.0

    def _prune(self, now: float):
        """Periodically remove IPs with no requests inside the window."""
        if now - self._last_prune_time < _PRUNE_INTERVAL:
            return
        self._last_prune_time = now
        stale_keys = [
            ip for ip, timestamps in self._requests.items()
            if not any(now - t < self.window_seconds for t in timestamps)
        ]
        for ip in stale_keys:
            del self._requests[ip]
        if stale_keys:
            logger.debug("Pruned %d stale rate limiter entries", len(stale_keys))

    async def dispatch(self, request: Request, call_next):
        now = self.clock()
        self._prune(now)

        ip = request.client.host if request.client else "unknown"
        self._requests[ip] = [t for t in self._requests[ip] if now - t < self.window_seconds]
        timestamps = self._requests[ip]

        if len(timestamps) >= self.max_requests:
            retry_after = max(1, int(self.window_seconds - (now - timestamps[0])))
            logger.warning(f"Rate limit exceeded for {ip} ({len(timestamps)} requests)")
            return JSONResponse(
                status_code=429,
                content=failure("Too many requests, please try again later."),
                headers={"Retry-After": str(retry_after)},
            )

        timestamps.append(now)
        return await call_next(request)
