"""
Base session store interface.
"""

import asyncio
from abc import ABC, abstractmethod

from handbook_assistant.core.message import Message, Role


class SessionStore(ABC):
    """
    Abstract mapping from session id to an append-only transcript.

    Implementations may bound or persist transcripts; the orchestrator only
    relies on the operations below.
    """

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}

    def lock(self, session_id: str) -> asyncio.Lock:
        """
        Get the lock that serializes exchanges for one session.

        Args:
            session_id: The session id

        Returns:
            The session's lock, created on first use
        """
        if session_id not in self._locks:
            self._locks[session_id] = asyncio.Lock()
        return self._locks[session_id]

    @abstractmethod
    async def get_or_create(self, session_id: str) -> list[Message]:
        """
        Get the transcript for a session, creating an empty one if needed.

        Args:
            session_id: The session id

        Returns:
            A copy of the transcript messages, oldest first
        """
        pass

    @abstractmethod
    async def append(self, session_id: str, role: Role | str, content: str) -> None:
        """
        Append one turn to a session's transcript.

        Args:
            session_id: The session id
            role: Role of the turn
            content: Text of the turn
        """
        pass

    async def append_turn(self, session_id: str, user: str, assistant: str) -> None:
        """Append a completed user/assistant exchange."""
        await self.append(session_id, Role.USER, user)
        await self.append(session_id, Role.ASSISTANT, assistant)

    @abstractmethod
    async def clear(self, session_id: str) -> bool:
        """Forget a session. Returns True if it existed."""
        pass

    @abstractmethod
    def sessions(self) -> list[str]:
        """List known session ids."""
        pass

    def __len__(self) -> int:
        return len(self.sessions())
