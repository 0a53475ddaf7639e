from .chat import (
    ChatRequest,
    ChatResponse,
    EmergencyContact,
    Medication,
    ProbeResponse,
    UserData,
)
from .error import ErrorResponse, UpstreamErrorResponse
from .health import HealthResponse

__all__ = [
    "ErrorResponse",
    "UpstreamErrorResponse",
    "ChatRequest",
    "ChatResponse",
    "ProbeResponse",
    "UserData",
    "Medication",
    "EmergencyContact",
    "HealthResponse",
]
