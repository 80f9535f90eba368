"""
FastAPI application exposing the chat endpoint.

Routes:
- POST /chat - Answer a message with handbook context and session memory
- GET /health - Liveness plus handbook availability
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from handbook_assistant.chat import ChatOrchestrator
from handbook_assistant.utils.config import AssistantConfig, load_config
from handbook_assistant.utils.logging import configure_logging

logger = logging.getLogger(__name__)


class ChatRequest(BaseModel):
    """Body of POST /chat."""
    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(min_length=1)
    session_id: Optional[str] = Field(default=None, alias="sessionId")
    use_handbook: bool = Field(default=True, alias="useHandbook")


class ChatResponse(BaseModel):
    reply: str
    sources: list[str] = []


class ChatErrorResponse(BaseModel):
    error: str
    message: str
    reply: str


class HealthResponse(BaseModel):
    status: str
    handbook: bool
    sessions: int


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the handbook before the first request is served."""
    orchestrator: ChatOrchestrator = app.state.orchestrator
    chunks = await orchestrator.load_chunks()
    logger.info(f"Handbook index warmed: {len(chunks)} chunks")
    yield


def create_app(
    config: Optional[AssistantConfig] = None,
    orchestrator: Optional[ChatOrchestrator] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Assistant configuration (loaded from file/env when omitted)
        orchestrator: Pre-built orchestrator, mainly for tests

    Returns:
        FastAPI: Configured application instance
    """
    if config is None:
        config = load_config()
    if orchestrator is None:
        orchestrator = ChatOrchestrator.from_config(config)

    app = FastAPI(
        title="Handbook Assistant API",
        description="Chat assistant grounded in the employee handbook",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.orchestrator = orchestrator

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.post(
        "/chat",
        response_model=ChatResponse,
        responses={500: {"model": ChatErrorResponse}},
    )
    async def chat(payload: ChatRequest, request: Request):
        """Send a chat message; returns the reply and the handbook excerpts used."""
        orchestrator: ChatOrchestrator = request.app.state.orchestrator
        result = await orchestrator.respond(
            payload.session_id,
            payload.message,
            use_handbook=payload.use_handbook,
        )
        if not result.ok:
            return JSONResponse(
                status_code=500,
                content=ChatErrorResponse(
                    error="Model call failed",
                    message=result.error or "",
                    reply=result.reply,
                ).model_dump(),
            )
        return ChatResponse(reply=result.reply, sources=result.sources)

    @app.get("/health", response_model=HealthResponse)
    async def health(request: Request) -> HealthResponse:
        orchestrator: ChatOrchestrator = request.app.state.orchestrator
        chunks = await orchestrator.load_chunks()
        return HealthResponse(
            status="ok",
            handbook=bool(chunks),
            sessions=len(orchestrator.store),
        )

    return app


def main() -> None:
    """Run the API server with uvicorn."""
    config = load_config()
    configure_logging(config.log_level)

    app = create_app(config)
    logger.info(f"AI API server running on port {config.port}")
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
