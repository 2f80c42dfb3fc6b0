"""Food targeting helpers."""

from __future__ import annotations

from collections.abc import Sequence

from snake_agent.snake import Coord


def nearest_food(head: Coord, food: Sequence[Coord]) -> Coord | None:
    """Return the food closest to *head* by Manhattan distance.

    Ties go to the item listed first. Returns ``None`` when the board
    has no food.
    """
    if not food:
        return None
    return min(food, key=head.manhattan)
