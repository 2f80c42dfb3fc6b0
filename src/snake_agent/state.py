"""Per-turn game state handed to the agent."""

from __future__ import annotations

from dataclasses import dataclass

from snake_agent.snake import Coord, Snake


@dataclass(frozen=True)
class Board:
    """Board dimensions plus everything placed on it this turn."""

    width: int
    height: int
    food: tuple[Coord, ...] = ()
    snakes: tuple[Snake, ...] = ()

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Board dimensions must be positive.")


@dataclass(frozen=True)
class GameState:
    """Everything the agent sees on a single turn."""

    game_id: str
    board: Board
    you: Snake
    turn: int = 0
