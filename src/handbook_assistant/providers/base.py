"""
Base LLM Provider interface.
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel

from handbook_assistant.core.message import Message


class LLMResponse(BaseModel):
    """Response from an LLM."""
    message: Message
    usage: dict[str, int] = {}

    @property
    def content(self) -> str:
        return self.message.content


class LLMProvider(ABC):
    """
    Abstract base class for chat-completion providers.
    """

    @abstractmethod
    async def complete(
        self,
        messages: list[dict[str, Any]],
        *,
        model: str,
        temperature: float = 1.0,
        top_p: float = 1.0,
        max_tokens: int = 4096,
        **kwargs: Any
    ) -> LLMResponse:
        """
        Get a completion from the LLM.

        Args:
            messages: List of ``{"role", "content"}`` messages
            model: Model or deployment identifier
            temperature: Sampling temperature
            top_p: Nucleus sampling mass
            max_tokens: Maximum tokens to generate
            **kwargs: Additional provider-specific options

        Returns:
            The assistant reply

        Raises:
            InferenceError: If the call fails or the reply is empty
        """
        pass
