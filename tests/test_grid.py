"""Tests for the occupancy grid and neighbor evaluation."""

import numpy as np
import pytest

from snake_agent.grid import (
    BoundaryPolicy,
    CoordinateOutOfBounds,
    OccupancyGrid,
    PotentialMove,
)
from snake_agent.snake import Coord, Direction, Snake
from snake_agent.state import Board, GameState


def _availability(moves):
    return {m.direction: m.is_available for m in moves}


class TestGridInit:
    def test_dimensions(self):
        grid = OccupancyGrid(width=3, height=4)
        assert grid.width == 3
        assert grid.height == 4
        assert grid.cells.shape == (4, 3)

    def test_all_cells_start_free(self):
        grid = OccupancyGrid(5, 5)
        assert grid.cells.dtype == bool
        assert not grid.cells.any()

    def test_positive_dimensions_enforced(self):
        with pytest.raises(ValueError, match="positive"):
            OccupancyGrid(0, 5)
        with pytest.raises(ValueError, match="positive"):
            OccupancyGrid(5, -1)


class TestGridMark:
    def test_rows_are_flipped(self):
        grid = OccupancyGrid(width=3, height=4)
        grid.mark([Coord(0, 0), Coord(2, 3)])
        assert grid.cells[3, 0]
        assert grid.cells[0, 2]
        assert grid.cells.sum() == 2

    def test_union_of_bodies(self):
        grid = OccupancyGrid(6, 6)
        a = [Coord(1, 1), Coord(1, 2), Coord(1, 3)]
        b = [Coord(4, 4), Coord(3, 4), Coord(1, 3)]
        grid.mark(a)
        grid.mark(b)
        assert grid.occupied_coords() == set(a) | set(b)

    def test_mark_is_idempotent(self):
        body = [Coord(2, 2), Coord(2, 1), Coord(3, 1)]
        once = OccupancyGrid(5, 5)
        once.mark(body)
        twice = OccupancyGrid(5, 5)
        twice.mark(body)
        twice.mark(body)
        assert np.array_equal(once.cells, twice.cells)

    def test_out_of_bounds_rejected(self):
        grid = OccupancyGrid(5, 5)
        with pytest.raises(CoordinateOutOfBounds, match=r"\(5, 0\)"):
            grid.mark([Coord(0, 0), Coord(5, 0)])

    def test_out_of_bounds_is_index_error(self):
        grid = OccupancyGrid(5, 5)
        with pytest.raises(IndexError):
            grid.mark([Coord(0, -1)])

    def test_rejected_body_leaves_grid_untouched(self):
        grid = OccupancyGrid(5, 5)
        with pytest.raises(CoordinateOutOfBounds):
            grid.mark([Coord(1, 1), Coord(1, 5)])
        assert not grid.cells.any()

    def test_accepts_generator(self):
        grid = OccupancyGrid(4, 4)
        grid.mark(Coord(x, 0) for x in range(4))
        assert grid.cells[3].all()


class TestGridQueries:
    def test_in_bounds(self):
        grid = OccupancyGrid(5, 4)
        assert grid.in_bounds(Coord(0, 0))
        assert grid.in_bounds(Coord(4, 3))
        assert not grid.in_bounds(Coord(-1, 0))
        assert not grid.in_bounds(Coord(5, 0))
        assert not grid.in_bounds(Coord(0, 4))

    def test_is_occupied(self):
        grid = OccupancyGrid(5, 5)
        grid.mark([Coord(3, 1)])
        assert grid.is_occupied(Coord(3, 1))
        assert not grid.is_occupied(Coord(1, 3))

    def test_occupied_positions(self):
        grid = OccupancyGrid(3, 3)
        grid.mark([Coord(1, 1), Coord(0, 0), Coord(2, 2)])
        assert grid.occupied_positions() == [0, 4, 8]

    def test_to_dict(self):
        grid = OccupancyGrid(3, 2)
        grid.mark([Coord(0, 1)])
        d = grid.to_dict()
        assert d["width"] == 3
        assert d["height"] == 2
        assert d["cells"] == [[True, False, False], [False, False, False]]
        assert d["occupied"] == [3]


class TestFromState:
    def test_marks_you_and_every_snake(self):
        you = Snake("me", (Coord(1, 1), Coord(1, 0)))
        other = Snake("them", (Coord(3, 3), Coord(3, 2)))
        state = GameState(
            game_id="g",
            board=Board(5, 5, snakes=(you, other)),
            you=you,
        )
        grid = OccupancyGrid.from_state(state)
        assert grid.occupied_coords() == {
            Coord(1, 1), Coord(1, 0), Coord(3, 3), Coord(3, 2),
        }

    def test_you_marked_even_if_missing_from_board(self):
        you = Snake("me", (Coord(2, 2),))
        state = GameState(game_id="g", board=Board(5, 5), you=you)
        grid = OccupancyGrid.from_state(state)
        assert grid.is_occupied(Coord(2, 2))


class TestEvaluateNeighbors:
    def test_one_entry_per_direction_in_order(self):
        moves = OccupancyGrid(5, 5).evaluate_neighbors(Coord(2, 2))
        assert [m.direction for m in moves] == [
            Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT,
        ]

    def test_potential_move_defaults_unavailable(self):
        assert PotentialMove(Direction.UP).is_available is False

    def test_open_interior_all_available(self):
        grid = OccupancyGrid(5, 5)
        grid.mark([Coord(2, 2)])
        avail = _availability(grid.evaluate_neighbors(Coord(2, 2)))
        assert all(avail.values())

    def test_occupied_neighbors_blocked(self):
        grid = OccupancyGrid(5, 5)
        grid.mark([Coord(2, 3), Coord(3, 2)])
        avail = _availability(grid.evaluate_neighbors(Coord(2, 2)))
        assert avail == {
            Direction.UP: False,
            Direction.DOWN: True,
            Direction.LEFT: True,
            Direction.RIGHT: False,
        }

    @pytest.mark.parametrize("policy", list(BoundaryPolicy))
    def test_bottom_left_corner(self, policy):
        grid = OccupancyGrid(5, 5)
        avail = _availability(grid.evaluate_neighbors(Coord(0, 0), policy))
        assert avail[Direction.DOWN] is False
        assert avail[Direction.LEFT] is False
        assert avail[Direction.UP] is True
        assert avail[Direction.RIGHT] is True

    def test_top_right_corner(self):
        grid = OccupancyGrid(5, 5)
        avail = _availability(grid.evaluate_neighbors(Coord(4, 4)))
        assert avail[Direction.UP] is False
        assert avail[Direction.RIGHT] is False
        assert avail[Direction.DOWN] is True
        assert avail[Direction.LEFT] is True

    def test_strict_rejects_top_row(self):
        grid = OccupancyGrid(5, 5)
        head = Coord(2, 3)
        strict = _availability(grid.evaluate_neighbors(head))
        inclusive = _availability(
            grid.evaluate_neighbors(head, BoundaryPolicy.INCLUSIVE),
        )
        assert strict[Direction.UP] is False
        assert inclusive[Direction.UP] is True

    def test_strict_rejects_first_column(self):
        grid = OccupancyGrid(5, 5)
        head = Coord(1, 2)
        strict = _availability(grid.evaluate_neighbors(head))
        inclusive = _availability(
            grid.evaluate_neighbors(head, BoundaryPolicy.INCLUSIVE),
        )
        assert strict[Direction.LEFT] is False
        assert inclusive[Direction.LEFT] is True

    def test_inclusive_still_checks_occupancy(self):
        grid = OccupancyGrid(5, 5)
        grid.mark([Coord(0, 2)])
        avail = _availability(
            grid.evaluate_neighbors(Coord(1, 2), BoundaryPolicy.INCLUSIVE),
        )
        assert avail[Direction.LEFT] is False

    def test_head_out_of_bounds(self):
        with pytest.raises(CoordinateOutOfBounds):
            OccupancyGrid(5, 5).evaluate_neighbors(Coord(5, 5))


class TestBoundaryPolicy:
    def test_admits(self):
        assert not BoundaryPolicy.STRICT.admits(0)
        assert BoundaryPolicy.STRICT.admits(1)
        assert BoundaryPolicy.INCLUSIVE.admits(0)
        assert not BoundaryPolicy.INCLUSIVE.admits(-1)
