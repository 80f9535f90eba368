"""
Chat orchestration: retrieval, prompt assembly, model call, memory update.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from pydantic import BaseModel, Field

from handbook_assistant.core.message import Message
from handbook_assistant.exceptions import InferenceError
from handbook_assistant.memory import InMemorySessionStore, SessionStore
from handbook_assistant.providers import LLMProvider, create_provider
from handbook_assistant.rag import BaseRetriever, HandbookIndex, KeywordRetriever
from handbook_assistant.utils.config import AssistantConfig

logger = logging.getLogger(__name__)

FALLBACK_REPLY = "Sorry, I encountered an error. Please try again."

CONTEXT_TEMPLATE = """Relevant excerpts from the employee handbook:
{excerpts}

Question: {message}"""


class ChatResult(BaseModel):
    """Outcome of one chat exchange."""
    reply: str
    sources: list[str] = Field(default_factory=list)
    usage: dict[str, int] = Field(default_factory=dict)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ChatOrchestrator:
    """
    Answers chat messages with handbook context and session memory.

    Exchanges that share a session id run one at a time; a failed exchange
    leaves the session transcript unchanged.
    """

    def __init__(
        self,
        provider: LLMProvider,
        handbook: Optional[HandbookIndex] = None,
        store: Optional[SessionStore] = None,
        retriever: Optional[BaseRetriever] = None,
        config: Optional[AssistantConfig] = None,
    ):
        self.config = config if config is not None else AssistantConfig()
        self.provider = provider
        self.handbook = handbook
        self.store = store if store is not None else InMemorySessionStore(self.config.max_history_turns)
        self.retriever = retriever if retriever is not None else KeywordRetriever()

    @classmethod
    def from_config(cls, config: AssistantConfig) -> "ChatOrchestrator":
        """Wire the default provider, handbook index and session store."""
        return cls(
            provider=create_provider(config),
            handbook=HandbookIndex(config.handbook_path, config.chunk_size),
            store=InMemorySessionStore(config.max_history_turns),
            config=config,
        )

    async def load_chunks(self) -> tuple[str, ...]:
        """Handbook chunks, loaded off the event loop on first use."""
        if self.handbook is None:
            return ()
        return await asyncio.to_thread(lambda: self.handbook.chunks)

    async def retrieve_sources(self, message: str) -> list[str]:
        """Select handbook chunks relevant to a message; empty if none or unavailable."""
        chunks = await self.load_chunks()
        if not chunks:
            return []
        return self.retriever.retrieve(message, chunks, self.config.top_k)

    def build_messages(
        self,
        history: list[Message],
        message: str,
        sources: list[str],
    ) -> list[dict[str, Any]]:
        """Assemble system prompt, prior turns and the (possibly augmented) user message."""
        content = message
        if sources:
            excerpts = "\n\n".join(f"[{i}] {source}" for i, source in enumerate(sources, 1))
            content = CONTEXT_TEMPLATE.format(excerpts=excerpts, message=message)

        messages = [Message.system(self.config.system_prompt)]
        messages.extend(history)
        messages.append(Message.user(content))
        return [m.to_api_format() for m in messages]

    async def respond(
        self,
        session_id: Optional[str],
        message: str,
        use_handbook: bool = True,
    ) -> ChatResult:
        """
        Answer one user message.

        Args:
            session_id: Conversation id; falls back to the configured default
            message: The user's message
            use_handbook: Whether to augment the prompt with handbook excerpts

        Returns:
            ChatResult with the reply and sources, or the fallback reply and
            an error detail on failure
        """
        session_id = session_id or self.config.default_session_id

        async with self.store.lock(session_id):
            try:
                sources = await self.retrieve_sources(message) if use_handbook else []
                history = await self.store.get_or_create(session_id)
                messages = self.build_messages(history, message, sources)

                response = await self.provider.complete(
                    messages,
                    model=self.config.model,
                    temperature=self.config.temperature,
                    top_p=self.config.top_p,
                    max_tokens=self.config.max_tokens,
                )
                reply = response.content
                await self.store.append_turn(session_id, message, reply)
            except InferenceError as e:
                logger.error(f"Session {session_id}: {e.message}")
                return ChatResult(reply=FALLBACK_REPLY, error=e.message)
            except Exception as e:
                logger.exception(f"Session {session_id}: chat exchange failed")
                return ChatResult(reply=FALLBACK_REPLY, error=str(e) or type(e).__name__)

        tokens = response.usage.get("total_tokens", 0)
        logger.info(f"Session {session_id}: replied using {len(sources)} handbook excerpts, {tokens} tokens")
        return ChatResult(reply=reply, sources=sources, usage=response.usage)
