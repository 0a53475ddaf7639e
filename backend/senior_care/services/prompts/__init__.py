from .chat_prompts import (
    PROBE_PROMPT,
    SENIOR_CARE_SYSTEM_PROMPT,
    build_system_prompt,
)

__all__ = [
    "PROBE_PROMPT",
    "SENIOR_CARE_SYSTEM_PROMPT",
    "build_system_prompt",
]
