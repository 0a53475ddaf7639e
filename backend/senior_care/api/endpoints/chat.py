"""
Chat relay endpoints.

Forwards a user message plus session context to Claude and returns the reply.
"""
from fastapi import APIRouter, Depends, status

from senior_care.api.dependencies.app_state import get_chat_controller
from senior_care.api.models import (
    ChatRequest,
    ChatResponse,
    ErrorResponse,
    ProbeResponse,
    UpstreamErrorResponse,
)
from senior_care.controllers.chat_controller import ChatController

router = APIRouter()


@router.post(
    "/chat",
    response_model=ChatResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        429: {"model": UpstreamErrorResponse, "description": "Upstream rate limit"},
        500: {"model": UpstreamErrorResponse, "description": "Upstream failure"},
    },
)
@router.post("/chat/", response_model=ChatResponse, include_in_schema=False)
async def chat(
    request: ChatRequest,
    controller: ChatController = Depends(get_chat_controller),
) -> ChatResponse:
    """
    Chat with the senior care assistant.

    The optional userData (location, medications, item locations, water
    intake, emergency contacts) is rendered into the system prompt. Every
    call makes at most one request to the Anthropic API.
    """
    return await controller.chat(request)


@router.get(
    "/chat/test",
    response_model=ProbeResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ProbeResponse, "description": "Upstream check failed"}},
)
async def chat_test(controller: ChatController = Depends(get_chat_controller)) -> ProbeResponse:
    """Check that the Anthropic API answers a trivial prompt."""
    return await controller.probe()
