"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from snake_agent.agent import SnakeAgent
from snake_agent.config import AgentConfig
from snake_agent.server.routes import router


def create_app(config: AgentConfig | None = None) -> FastAPI:
    """Build the webhook application around a single shared agent."""
    app = FastAPI(title="Snake Agent", version="0.1.0")
    app.state.agent = SnakeAgent(config)
    app.include_router(router)
    return app
