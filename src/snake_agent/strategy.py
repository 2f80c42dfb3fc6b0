"""Move selection strategies.

A strategy turns the four annotated neighbor moves into a single
:class:`MoveDecision`. Strategies hold no per-game state, so one instance
can serve any number of concurrent games.
"""

from __future__ import annotations

import abc
from collections.abc import Sequence
from dataclasses import dataclass

from snake_agent.food import nearest_food
from snake_agent.grid import PotentialMove
from snake_agent.snake import Coord, Direction

# Returned when no neighbor is safe; the API still requires a move.
LAST_RESORT = Direction.UP


@dataclass(frozen=True)
class MoveDecision:
    """The chosen direction and whether it was proven safe."""

    direction: Direction
    safe: bool = True


def first_available(moves: Sequence[PotentialMove]) -> MoveDecision:
    """Take the first available move in listed order, else the last resort."""
    for move in moves:
        if move.is_available:
            return MoveDecision(move.direction)
    return MoveDecision(LAST_RESORT, safe=False)


class MoveStrategy(abc.ABC):
    """Interface for picking a move from the candidate set."""

    name: str

    @abc.abstractmethod
    def choose(
        self,
        moves: Sequence[PotentialMove],
        head: Coord,
        food: Sequence[Coord],
    ) -> MoveDecision:
        """Return the move to play this turn."""


class SafeFirstStrategy(MoveStrategy):
    """Scan up, down, left, right and play the first safe move."""

    name = "safe"

    def choose(
        self,
        moves: Sequence[PotentialMove],
        head: Coord,
        food: Sequence[Coord],
    ) -> MoveDecision:
        return first_available(moves)


class FoodSeekingStrategy(MoveStrategy):
    """Steer toward the nearest food, falling back to the safe scan.

    Rules are tried in order: food further along x and left free; food
    behind on x and right free; food above and up free; then down if
    free. Anything else defers to :func:`first_available`.
    """

    name = "food"

    def choose(
        self,
        moves: Sequence[PotentialMove],
        head: Coord,
        food: Sequence[Coord],
    ) -> MoveDecision:
        target = nearest_food(head, food)
        if target is None:
            return first_available(moves)

        available = {m.direction for m in moves if m.is_available}
        if target.x > head.x and Direction.LEFT in available:
            return MoveDecision(Direction.LEFT)
        if target.x < head.x and Direction.RIGHT in available:
            return MoveDecision(Direction.RIGHT)
        if target.y > head.y and Direction.UP in available:
            return MoveDecision(Direction.UP)
        if Direction.DOWN in available:
            return MoveDecision(Direction.DOWN)
        return first_available(moves)


STRATEGIES: dict[str, type[MoveStrategy]] = {
    SafeFirstStrategy.name: SafeFirstStrategy,
    FoodSeekingStrategy.name: FoodSeekingStrategy,
}


def get_strategy(name: str) -> MoveStrategy:
    """Instantiate a registered strategy by name."""
    try:
        return STRATEGIES[name]()
    except KeyError:
        raise KeyError(f"Strategy {name!r} is not registered.") from None
