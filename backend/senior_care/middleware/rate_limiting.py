"""
Per-client rate limiting for the API routes.
"""
import logging
import math
from typing import Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from senior_care.utils.rate_limiter import RateLimitDecision, SlidingWindowRateLimiter
from senior_care.utils.request_meta import get_client_ip

logger = logging.getLogger(__name__)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Reject clients that exceed the sliding-window budget under ``path_prefix``."""

    def __init__(
        self,
        app,
        limiter: SlidingWindowRateLimiter,
        message: str,
        path_prefix: str = "/api",
        trust_proxy_headers: bool = False,
    ):
        super().__init__(app)
        self.limiter = limiter
        self.message = message
        self.path_prefix = path_prefix
        self.trust_proxy_headers = trust_proxy_headers

    def _applies_to(self, path: str) -> bool:
        return path == self.path_prefix or path.startswith(self.path_prefix + "/")

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if not self._applies_to(request.url.path):
            return await call_next(request)

        client_ip = get_client_ip(request, self.trust_proxy_headers)
        decision = self.limiter.hit(client_ip)

        if not decision.allowed:
            logger.warning(f"Rate limit exceeded for {client_ip} on {request.url.path}")
            response = JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={"error": "Too many requests", "message": self.message},
            )
            response.headers["Retry-After"] = str(math.ceil(decision.reset_after))
        else:
            response = await call_next(request)

        self._set_headers(response, decision)
        return response

    @staticmethod
    def _set_headers(response: Response, decision: RateLimitDecision) -> None:
        response.headers["RateLimit-Limit"] = str(decision.limit)
        response.headers["RateLimit-Remaining"] = str(decision.remaining)
        response.headers["RateLimit-Reset"] = str(math.ceil(decision.reset_after))
