"""
Request body size ceiling.
"""
import logging
from typing import Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

BODY_METHODS = ("POST", "PUT", "PATCH", "DELETE")


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject request bodies larger than ``max_bytes`` with a 413."""

    def __init__(self, app, max_bytes: int):
        super().__init__(app)
        self.max_bytes = max_bytes

    def _too_large(self) -> JSONResponse:
        return JSONResponse(
            status_code=413,
            content={
                "error": "Payload too large",
                "message": f"Request body exceeds {self.max_bytes} bytes",
            },
        )

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method not in BODY_METHODS:
            return await call_next(request)

        content_length = request.headers.get("content-length")
        if content_length is not None:
            try:
                declared = int(content_length)
            except ValueError:
                return JSONResponse(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    content={"error": "Invalid Content-Length header"},
                )
            if declared > self.max_bytes:
                logger.warning(f"Rejected {declared} byte body on {request.url.path}")
                return self._too_large()
        else:
            # Chunked upload: the body is read here and replayed to the route
            body = await request.body()
            if len(body) > self.max_bytes:
                logger.warning(f"Rejected {len(body)} byte chunked body on {request.url.path}")
                return self._too_large()

        return await call_next(request)
