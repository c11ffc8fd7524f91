# ===== app/api/middleware/rate_limit_middleware.py =====
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
import logging
import time

logger = logging.getLogger(__name__)

# Public form submissions that anyone can reach without a token
LIMITED_PATHS = ("/api/v1/appointments", "/api/v1/orders")


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Per-client rate limit for the public booking and checkout forms.

    Only POSTs to the submission endpoints count; admin reads and catalog
    lookups pass through untouched.
    """

    def __init__(self, app, requests_per_minute: int = 30):
        super().__init__(app)
        self.requests_per_minute = requests_per_minute
        self.request_times = {}  # In production, use Redis
        self._last_sweep = time.time()

    async def dispatch(self, request: Request, call_next):
        if request.method != "POST" or request.url.path.rstrip("/") not in LIMITED_PATHS:
            return await call_next(request)

        if self.requests_per_minute <= 0:
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        current_time = time.time()
        self._sweep(current_time)

        # Simple sliding window (in production, use Redis)
        window = [
            t for t in self.request_times.get(client_ip, [])
            if current_time - t < 60.0
        ]

        if len(window) >= self.requests_per_minute:
            self.request_times[client_ip] = window
            logger.warning(f"Rate limit exceeded for {client_ip} on {request.url.path}")
            return JSONResponse(
                status_code=429,
                content={
                    "error": "Too many requests",
                    "retryAfter": 60
                },
                headers={"Retry-After": "60"}
            )

        window.append(current_time)
        self.request_times[client_ip] = window

        return await call_next(request)

    def _sweep(self, current_time: float) -> None:
        """Drop clients with no request inside the window, at most once a minute"""
        if current_time - self._last_sweep < 60.0:
            return

        idle = [
            client_ip for client_ip, times in self.request_times.items()
            if not times or current_time - times[-1] >= 60.0
        ]
        for client_ip in idle:
            del self.request_times[client_ip]
        self._last_sweep = current_time
