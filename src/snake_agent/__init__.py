"""Snake Agent — Battlesnake move selection."""

from snake_agent.agent import SnakeAgent
from snake_agent.config import AgentConfig
from snake_agent.food import nearest_food
from snake_agent.grid import (
    BoundaryPolicy,
    CoordinateOutOfBounds,
    OccupancyGrid,
    PotentialMove,
)
from snake_agent.snake import Coord, Direction, Snake
from snake_agent.state import Board, GameState
from snake_agent.strategy import (
    FoodSeekingStrategy,
    MoveDecision,
    MoveStrategy,
    SafeFirstStrategy,
    get_strategy,
)

__all__ = [
    "AgentConfig",
    "Board",
    "BoundaryPolicy",
    "Coord",
    "CoordinateOutOfBounds",
    "Direction",
    "FoodSeekingStrategy",
    "GameState",
    "MoveDecision",
    "MoveStrategy",
    "OccupancyGrid",
    "PotentialMove",
    "SafeFirstStrategy",
    "Snake",
    "SnakeAgent",
    "get_strategy",
    "nearest_food",
]
