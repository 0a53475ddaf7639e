"""
Helpers for reading request metadata shared by the middleware.
"""
from datetime import datetime, timezone

from starlette.requests import Request


def get_client_ip(request: Request, trust_proxy_headers: bool = False) -> str:
    """Extract client IP address from request."""
    if trust_proxy_headers:
        # Check for forwarded headers (when behind proxy)
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()

        real_ip = request.headers.get("x-real-ip")
        if real_ip:
            return real_ip

    # Fallback to direct client
    if request.client:
        return request.client.host

    return "unknown"


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2026-10-19T14:05:09.123Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
