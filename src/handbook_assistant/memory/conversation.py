"""
Conversation memory implementation.
"""

from __future__ import annotations

from handbook_assistant.core.message import Message, Role
from handbook_assistant.memory.base import SessionStore


class ConversationMemory:
    """
    Append-only transcript of one conversation.

    Turns are never removed or reordered.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []

    def add_message(self, message: Message) -> None:
        """Add a message to the transcript."""
        self._messages.append(message)

    def get_recent(self, n: int) -> list[Message]:
        """Get the N most recent messages."""
        if n <= 0:
            return []
        return list(self._messages[-n:])

    def get_recent_turns(self, n: int) -> list[Message]:
        """
        Get the messages of the N most recent exchanges.

        An exchange is a user message and the replies that follow it, so the
        result never starts with an assistant message.
        """
        recent = self.get_recent(2 * n)
        while recent and recent[0].role != Role.USER:
            recent.pop(0)
        return recent

    def get_all_messages(self) -> list[Message]:
        """Get every message, oldest first."""
        return list(self._messages)

    def __len__(self) -> int:
        return len(self._messages)


class InMemorySessionStore(SessionStore):
    """
    Process-resident session store.

    No TTL and no persistence. With ``max_turns`` set, only the most recent
    ``max_turns`` user/assistant exchanges are returned as context; stored
    history is kept.
    """

    def __init__(self, max_turns: int | None = None):
        super().__init__()
        if max_turns is not None and max_turns < 1:
            raise ValueError("max_turns must be positive")
        self.max_turns = max_turns
        self._memories: dict[str, ConversationMemory] = {}

    def _memory(self, session_id: str) -> ConversationMemory:
        if session_id not in self._memories:
            self._memories[session_id] = ConversationMemory()
        return self._memories[session_id]

    async def get_or_create(self, session_id: str) -> list[Message]:
        memory = self._memory(session_id)
        if self.max_turns is None:
            return memory.get_all_messages()
        return memory.get_recent_turns(self.max_turns)

    async def append(self, session_id: str, role: Role | str, content: str) -> None:
        self._memory(session_id).add_message(Message(role=Role(role), content=content))

    async def clear(self, session_id: str) -> bool:
        self._locks.pop(session_id, None)
        return self._memories.pop(session_id, None) is not None

    def sessions(self) -> list[str]:
        return list(self._memories)

    def transcript_length(self, session_id: str) -> int:
        """Number of stored messages for a session (0 if unknown)."""
        memory = self._memories.get(session_id)
        return len(memory) if memory else 0
