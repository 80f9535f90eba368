"""
Core message types.
"""

from handbook_assistant.core.message import Message, Role

__all__ = [
    "Message",
    "Role",
]
