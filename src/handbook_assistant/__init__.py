"""
Handbook Assistant - a retrieval-augmented chat assistant over one employee handbook.
"""

from handbook_assistant.core.message import Message, Role
from handbook_assistant.chat import FALLBACK_REPLY, ChatOrchestrator, ChatResult
from handbook_assistant.exceptions import (
    AssistantError,
    ConfigError,
    DocumentUnavailableError,
    InferenceError,
)
from handbook_assistant.memory import ConversationMemory, InMemorySessionStore, SessionStore
from handbook_assistant.providers import (
    AzureOpenAIProvider,
    LLMProvider,
    LLMResponse,
    OpenAIProvider,
    create_provider,
)
from handbook_assistant.rag import (
    Chunk,
    Document,
    HandbookIndex,
    KeywordRetriever,
    RegexScorer,
    ScoredChunk,
    WordChunker,
    chunk_text,
    extract_query_terms,
    extract_text,
)
from handbook_assistant.utils.config import AssistantConfig, load_config

__version__ = "0.1.0"
__all__ = [
    # Core
    "Message",
    "Role",
    # Chat
    "ChatOrchestrator",
    "ChatResult",
    "FALLBACK_REPLY",
    # Errors
    "AssistantError",
    "ConfigError",
    "DocumentUnavailableError",
    "InferenceError",
    # Memory
    "SessionStore",
    "ConversationMemory",
    "InMemorySessionStore",
    # Providers
    "LLMProvider",
    "LLMResponse",
    "OpenAIProvider",
    "AzureOpenAIProvider",
    "create_provider",
    # Retrieval
    "Document",
    "Chunk",
    "ScoredChunk",
    "WordChunker",
    "chunk_text",
    "KeywordRetriever",
    "RegexScorer",
    "extract_query_terms",
    "HandbookIndex",
    "extract_text",
    # Config
    "AssistantConfig",
    "load_config",
]
