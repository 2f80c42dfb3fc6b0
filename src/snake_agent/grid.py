"""Per-turn occupancy grid and neighbor safety checks."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from snake_agent.snake import Coord, Direction

if TYPE_CHECKING:
    from snake_agent.state import GameState


class BoundaryPolicy(enum.Enum):
    """How neighbors on the low edge (row 0 / column 0) are treated.

    ``STRICT`` rejects a neighbor whose row or column index is exactly 0,
    so the top row and left column are never offered as moves.
    ``INCLUSIVE`` accepts every on-board neighbor.
    """

    STRICT = "strict"
    INCLUSIVE = "inclusive"

    def admits(self, index: int) -> bool:
        """Check a row or column index against the low edge."""
        if self is BoundaryPolicy.STRICT:
            return index > 0
        return index >= 0


class CoordinateOutOfBounds(IndexError):
    """Raised when a coordinate does not lie on the board."""


@dataclass(frozen=True)
class PotentialMove:
    """A candidate direction and whether stepping there is safe."""

    direction: Direction
    is_available: bool = False


class OccupancyGrid:
    """NumPy-backed boolean grid of cells covered by any snake body.

    Rows are stored top-first: board ``y`` maps to row ``height - 1 - y``,
    while board ``x`` is the column index unchanged.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Grid dimensions must be positive.")
        self.width = width
        self.height = height
        self.cells = np.zeros((height, width), dtype=bool)

    @classmethod
    def from_state(cls, state: GameState) -> OccupancyGrid:
        """Build the grid for one turn, marking our snake and every other."""
        board = state.board
        grid = cls(board.width, board.height)
        grid.mark(state.you.body)
        for snake in board.snakes:
            grid.mark(snake.body)
        return grid

    def row_of(self, y: int) -> int:
        """Flip a board ``y`` into a top-first row index."""
        return self.height - 1 - y

    def in_bounds(self, coord: Coord) -> bool:
        """Check whether a coordinate lies on the board."""
        return 0 <= coord.x < self.width and 0 <= coord.y < self.height

    def _require_in_bounds(self, coord: Coord) -> None:
        if not self.in_bounds(coord):
            raise CoordinateOutOfBounds(
                f"Coordinate ({coord.x}, {coord.y}) is outside the "
                f"{self.width}x{self.height} board.",
            )

    def mark(self, coords: Iterable[Coord]) -> None:
        """Mark every coordinate as occupied.

        All coordinates are checked before any cell is written, so a bad
        body leaves the grid untouched.
        """
        coords = list(coords)
        for coord in coords:
            self._require_in_bounds(coord)
        for coord in coords:
            self.cells[self.row_of(coord.y), coord.x] = True

    def is_occupied(self, coord: Coord) -> bool:
        self._require_in_bounds(coord)
        return bool(self.cells[self.row_of(coord.y), coord.x])

    def occupied_coords(self) -> set[Coord]:
        """Return every occupied cell in board coordinates."""
        rows, cols = np.nonzero(self.cells)
        return {
            Coord(col, self.row_of(row))
            for row, col in zip(rows.tolist(), cols.tolist(), strict=True)
        }

    def occupied_positions(self) -> list[int]:
        """Return the flat board positions of all occupied cells, sorted."""
        return sorted(c.to_index(self.width) for c in self.occupied_coords())

    def evaluate_neighbors(
        self,
        head: Coord,
        policy: BoundaryPolicy = BoundaryPolicy.STRICT,
    ) -> tuple[PotentialMove, ...]:
        """Annotate the four orthogonal moves from *head* with availability.

        Always returns one entry per direction in the order up, down,
        left, right.
        """
        self._require_in_bounds(head)
        row = self.row_of(head.y)
        col = head.x
        cells = self.cells

        up = policy.admits(row - 1) and not cells[row - 1, col]
        down = row + 1 < self.height and not cells[row + 1, col]
        left = policy.admits(col - 1) and not cells[row, col - 1]
        right = col + 1 < self.width and not cells[row, col + 1]

        return (
            PotentialMove(Direction.UP, bool(up)),
            PotentialMove(Direction.DOWN, bool(down)),
            PotentialMove(Direction.LEFT, bool(left)),
            PotentialMove(Direction.RIGHT, bool(right)),
        )

    def to_dict(self) -> dict:
        """Serialize grid state to a dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "cells": self.cells.tolist(),
            "occupied": self.occupied_positions(),
        }
