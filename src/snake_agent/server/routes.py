"""Battlesnake webhook route handlers."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from snake_agent.grid import CoordinateOutOfBounds
from snake_agent.server.models import (
    GameStateRequest,
    InfoResponse,
    MoveResponse,
)

router = APIRouter(tags=["battlesnake"])


def _get_agent(request: Request):
    return request.app.state.agent


@router.get("/")
async def info(request: Request) -> InfoResponse:
    """Report the snake's appearance."""
    return InfoResponse(**_get_agent(request).info())


@router.post("/start")
async def start(body: GameStateRequest, request: Request) -> dict:
    """Acknowledge the start of a game."""
    _get_agent(request).start(body.to_domain())
    return {}


@router.post("/move", response_model_exclude_none=True)
async def move(body: GameStateRequest, request: Request) -> MoveResponse:
    """Choose the move for this turn."""
    state = body.to_domain()
    try:
        decision = _get_agent(request).move(state)
    except CoordinateOutOfBounds as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return MoveResponse(move=decision.direction.value)


@router.post("/end")
async def end(body: GameStateRequest, request: Request) -> dict:
    """Acknowledge the end of a game."""
    _get_agent(request).end(body.to_domain())
    return {}
