"""
Chat controller for the senior care relay.

Validates chat requests, builds the system prompt from the session context,
makes exactly one Anthropic Messages API call and shapes the result.
"""
import logging
from typing import Any, Optional

import anthropic
from anthropic import AsyncAnthropic
from fastapi import HTTPException, status

from senior_care.api.models.chat import ChatRequest, ChatResponse, ProbeResponse
from senior_care.config.settings import Settings
from senior_care.services.prompts import PROBE_PROMPT, build_system_prompt
from senior_care.services.user_context import build_user_context
from senior_care.utils.request_meta import utc_timestamp

logger = logging.getLogger(__name__)

AUTH_FAILED = {
    "error": "API authentication failed",
    "fallback": "I'm having trouble connecting right now. Please try again in a moment.",
}
RATE_LIMITED = {
    "error": "Rate limit exceeded",
    "fallback": "I'm getting too many requests right now. Please wait a moment and try again.",
}
GENERIC_FAILURE = {
    "error": "Failed to get response",
    "fallback": "I'm having trouble understanding right now. Could you try asking again?",
}


class UpstreamNotConfigured(RuntimeError):
    """Raised when no API key is configured for the upstream model."""


class EmptyUpstreamReply(ValueError):
    """Raised when the upstream reply carries no text block."""


def build_anthropic_client(settings: Settings) -> Optional[AsyncAnthropic]:
    """
    Create the shared Anthropic client, or None when no key is configured.

    Retries are disabled so a chat request makes at most one upstream call.
    """
    if not settings.anthropic_api_key:
        return None
    return AsyncAnthropic(
        api_key=settings.anthropic_api_key,
        timeout=settings.anthropic_timeout_seconds,
        max_retries=0,
    )


def extract_text(message: Any) -> str:
    """Join the text blocks of a Messages API reply."""
    blocks = getattr(message, "content", None) or []
    parts = [
        block.text
        for block in blocks
        if getattr(block, "type", "text") == "text" and isinstance(getattr(block, "text", None), str)
    ]
    if not parts:
        raise EmptyUpstreamReply("Upstream reply contained no text")
    return "".join(parts)


def upstream_error_detail(error: Exception) -> tuple:
    """Map an upstream failure to (HTTP status, error payload)."""
    if isinstance(error, UpstreamNotConfigured):
        return status.HTTP_500_INTERNAL_SERVER_ERROR, AUTH_FAILED

    status_code = getattr(error, "status_code", None)
    if isinstance(error, anthropic.AuthenticationError) or status_code == 401:
        return status.HTTP_500_INTERNAL_SERVER_ERROR, AUTH_FAILED
    if isinstance(error, anthropic.RateLimitError) or status_code == 429:
        return status.HTTP_429_TOO_MANY_REQUESTS, RATE_LIMITED
    return status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_FAILURE


class ChatController:
    """Controller for senior care chat operations."""

    def __init__(self, settings: Settings, client: Optional[AsyncAnthropic] = None):
        self.settings = settings
        self.client = client

    def _validate_request(self, request: ChatRequest) -> str:
        """
        Validate a chat request.

        Raises:
            HTTPException 400: If message is missing, not a string or empty
        """
        if not isinstance(request.message, str) or not request.message:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Message is required and must be a string",
            )
        return request.message

    def _require_client(self) -> AsyncAnthropic:
        if self.client is None:
            raise UpstreamNotConfigured("ANTHROPIC_API_KEY is not configured")
        return self.client

    async def chat(self, request: ChatRequest) -> ChatResponse:
        """
        Relay one user message to the model with the session context attached.

        Args:
            request: ChatRequest with message and optional userData

        Returns:
            ChatResponse with the model text and a server timestamp

        Raises:
            HTTPException 400: Invalid request, no upstream call made
            HTTPException 429/500: Upstream failure, detail carries a fallback sentence
        """
        message = self._validate_request(request)
        system_prompt = build_system_prompt(build_user_context(request.user_data))

        try:
            client = self._require_client()
            reply = await client.messages.create(
                model=self.settings.anthropic_model,
                max_tokens=self.settings.anthropic_max_tokens,
                temperature=self.settings.anthropic_temperature,
                system=system_prompt,
                messages=[{"role": "user", "content": message}],
            )
            text = extract_text(reply)
        except Exception as e:
            status_code, detail = upstream_error_detail(e)
            logger.error(f"Anthropic API error ({type(e).__name__}): {e}")
            raise HTTPException(status_code=status_code, detail=detail) from e

        if self.settings.log_conversations:
            logger.info(f"User: {message}")
            logger.info(f"Assistant: {text}")

        return ChatResponse(response=text, timestamp=utc_timestamp())

    async def probe(self) -> ProbeResponse:
        """
        Send a fixed trivial prompt to check the upstream connection.

        Raises:
            HTTPException 500: detail is the error-shaped ProbeResponse
        """
        try:
            client = self._require_client()
            reply = await client.messages.create(
                model=self.settings.anthropic_model,
                max_tokens=self.settings.probe_max_tokens,
                messages=[{"role": "user", "content": PROBE_PROMPT}],
            )
            text = extract_text(reply)
        except Exception as e:
            logger.error(f"Anthropic API test error ({type(e).__name__}): {e}")
            failure = ProbeResponse(status="error", message="Claude API test failed", error=str(e))
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=failure.model_dump(exclude_none=True),
            ) from e

        return ProbeResponse(
            status="success",
            message="Claude API is working correctly",
            response=text,
        )
