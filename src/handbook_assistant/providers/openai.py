"""
OpenAI and Azure OpenAI chat-completion providers.
"""

import logging
from typing import Any

import openai
from openai import AsyncAzureOpenAI, AsyncOpenAI

from handbook_assistant.core.message import Message
from handbook_assistant.exceptions import InferenceError
from handbook_assistant.providers.base import LLMProvider, LLMResponse

logger = logging.getLogger(__name__)

DEFAULT_AZURE_API_VERSION = "2024-08-01-preview"


class OpenAIProvider(LLMProvider):
    """
    Provider for the OpenAI API or any OpenAI-compatible endpoint.

    Pointing ``base_url`` at an Azure AI inference or GitHub Models
    endpoint works the same way.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        client: Any = None
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self._client = client

    def _get_client(self) -> Any:
        """Get or create the async client."""
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                max_retries=0
            )
        return self._client

    async def complete(
        self,
        messages: list[dict[str, Any]],
        *,
        model: str = "gpt-4o-mini",
        temperature: float = 1.0,
        top_p: float = 1.0,
        max_tokens: int = 4096,
        **kwargs: Any
    ) -> LLMResponse:
        """Get a completion from the endpoint."""
        params: dict[str, Any] = {
            "model": model,
            "messages": messages,
            "temperature": temperature,
            "top_p": top_p,
            "max_tokens": max_tokens,
        }
        params.update(kwargs)
        logger.debug(f"Calling {model} with {len(messages)} messages")

        try:
            client = self._get_client()
            response = await client.chat.completions.create(**params)
        except openai.OpenAIError as e:
            raise InferenceError(f"Model call failed: {e}") from e

        if not response.choices:
            raise InferenceError("Model returned no choices")

        choice = response.choices[0]
        content = choice.message.content if choice.message else None
        if not content:
            raise InferenceError("Model returned an empty reply")

        usage = response.usage
        return LLMResponse(
            message=Message.assistant(content),
            usage={
                "prompt_tokens": usage.prompt_tokens if usage else 0,
                "completion_tokens": usage.completion_tokens if usage else 0,
                "total_tokens": usage.total_tokens if usage else 0
            }
        )


class AzureOpenAIProvider(OpenAIProvider):
    """
    Provider for an Azure OpenAI deployment.

    The ``model`` passed to :meth:`complete` is ignored by Azure in favour of
    the deployment name.
    """

    def __init__(
        self,
        api_key: str | None = None,
        azure_endpoint: str | None = None,
        azure_deployment: str | None = None,
        api_version: str = DEFAULT_AZURE_API_VERSION,
        timeout: float | None = None,
        client: Any = None
    ):
        super().__init__(api_key=api_key, timeout=timeout, client=client)
        self.azure_endpoint = azure_endpoint
        self.azure_deployment = azure_deployment
        self.api_version = api_version

    def _get_client(self) -> Any:
        if self._client is None:
            self._client = AsyncAzureOpenAI(
                api_key=self.api_key,
                azure_endpoint=self.azure_endpoint,
                azure_deployment=self.azure_deployment,
                api_version=self.api_version,
                timeout=self.timeout,
                max_retries=0
            )
        return self._client
