"""
HTTP client for the chat endpoint.
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import BaseModel

from handbook_assistant.chat.orchestrator import FALLBACK_REPLY


class ChatReply(BaseModel):
    """What the widget shows for one message."""
    reply: str
    sources: list[str] = []
    error: str | None = None


class ChatClient:
    """
    Posts messages to ``POST /chat`` on the backend.

    Transport and HTTP errors become a ``ChatReply`` carrying the fallback
    reply, so the widget never raises.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def send(self, message: str, session_id: str, use_handbook: bool = True) -> ChatReply:
        payload: dict[str, Any] = {
            "message": message,
            "sessionId": session_id,
            "useHandbook": use_handbook,
        }
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.post("/chat", json=payload)
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            return ChatReply(reply=FALLBACK_REPLY, error=str(e))

        if response.is_error:
            return ChatReply(
                reply=data.get("reply", FALLBACK_REPLY),
                error=data.get("message") or data.get("error") or f"HTTP {response.status_code}",
            )
        return ChatReply(reply=data.get("reply", ""), sources=data.get("sources", []))
