"""Pydantic models for the Battlesnake webhook payloads."""

from __future__ import annotations

from pydantic import BaseModel, Field

from snake_agent.snake import Coord, Snake
from snake_agent.state import Board, GameState


class CoordModel(BaseModel):
    x: int
    y: int

    def to_domain(self) -> Coord:
        return Coord(self.x, self.y)


class SnakeModel(BaseModel):
    """A snake as sent by the game server."""

    id: str
    name: str = ""
    health: int = 100
    body: list[CoordModel] = Field(min_length=1)

    def to_domain(self) -> Snake:
        return Snake(
            snake_id=self.id,
            body=tuple(c.to_domain() for c in self.body),
            name=self.name,
            health=self.health,
        )


class BoardModel(BaseModel):
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    food: list[CoordModel] = Field(default_factory=list)
    snakes: list[SnakeModel] = Field(default_factory=list)


class GameModel(BaseModel):
    id: str


class GameStateRequest(BaseModel):
    """Request body for POST /start, /move and /end."""

    game: GameModel
    turn: int = 0
    board: BoardModel
    you: SnakeModel

    def to_domain(self) -> GameState:
        board = Board(
            width=self.board.width,
            height=self.board.height,
            food=tuple(f.to_domain() for f in self.board.food),
            snakes=tuple(s.to_domain() for s in self.board.snakes),
        )
        return GameState(
            game_id=self.game.id,
            board=board,
            you=self.you.to_domain(),
            turn=self.turn,
        )


class InfoResponse(BaseModel):
    """Response for GET /."""

    apiversion: str
    author: str
    color: str
    head: str
    tail: str


class MoveResponse(BaseModel):
    """Response for POST /move."""

    move: str
    shout: str | None = None
