"""
Session memory for chat transcripts.

- SessionStore: Abstract session id -> transcript mapping
- ConversationMemory: One append-only transcript
- InMemorySessionStore: Process-resident store
"""

from handbook_assistant.memory.base import SessionStore
from handbook_assistant.memory.conversation import ConversationMemory, InMemorySessionStore

__all__ = [
    "SessionStore",
    "ConversationMemory",
    "InMemorySessionStore",
]
