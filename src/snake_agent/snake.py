"""Coordinates, directions, and snake bodies on a Battlesnake board."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Direction(enum.Enum):
    """Move labels understood by the Battlesnake API."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Coord:
    """A board cell. The origin ``(0, 0)`` is the bottom-left corner."""

    x: int
    y: int

    def manhattan(self, other: Coord) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def to_index(self, width: int) -> int:
        """Flatten to a single board position, row by row from the bottom."""
        return self.x + self.y * width


@dataclass(frozen=True)
class Snake:
    """A snake as an ordered tuple of body segments.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    snake_id: str
    body: tuple[Coord, ...]
    name: str = ""
    health: int = 100

    def __post_init__(self) -> None:
        if not self.body:
            raise ValueError("Snake body must contain at least one segment.")

    @property
    def head(self) -> Coord:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def length(self) -> int:
        return len(self.body)
