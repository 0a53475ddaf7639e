from typing import Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str
    message: Optional[str] = None


class UpstreamErrorResponse(BaseModel):
    """Upstream failure with a sentence the front-end can show as-is."""

    error: str
    fallback: str
