"""Chat orchestration."""

from handbook_assistant.chat.orchestrator import (
    FALLBACK_REPLY,
    ChatOrchestrator,
    ChatResult,
)

__all__ = ["FALLBACK_REPLY", "ChatOrchestrator", "ChatResult"]
