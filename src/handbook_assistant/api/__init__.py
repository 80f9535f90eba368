"""HTTP API for the handbook assistant."""

from handbook_assistant.api.app import ChatRequest, ChatResponse, create_app, main

__all__ = ["ChatRequest", "ChatResponse", "create_app", "main"]
