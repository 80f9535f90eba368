"""
Browser chat widget for the handbook assistant.
"""

from handbook_assistant.ui.client import ChatClient, ChatReply
from handbook_assistant.ui.gradio_app import create_app, handle_chat, launch_app

__all__ = [
    "ChatClient",
    "ChatReply",
    "create_app",
    "handle_chat",
    "launch_app",
]
