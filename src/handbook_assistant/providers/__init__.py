"""
LLM Providers module.
"""

from handbook_assistant.providers.base import LLMProvider, LLMResponse
from handbook_assistant.providers.openai import AzureOpenAIProvider, OpenAIProvider
from handbook_assistant.utils.config import AssistantConfig


def create_provider(config: AssistantConfig) -> LLMProvider:
    """Build the provider selected by ``config.provider``."""
    if config.provider == "azure":
        return AzureOpenAIProvider(
            api_key=config.api_key,
            azure_endpoint=config.azure_endpoint,
            azure_deployment=config.azure_deployment,
            api_version=config.api_version,
            timeout=config.request_timeout,
        )
    return OpenAIProvider(
        api_key=config.api_key,
        base_url=config.base_url,
        timeout=config.request_timeout,
    )


__all__ = [
    "LLMProvider",
    "LLMResponse",
    "OpenAIProvider",
    "AzureOpenAIProvider",
    "create_provider",
]
