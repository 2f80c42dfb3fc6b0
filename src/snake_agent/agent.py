"""Battlesnake agent composing the occupancy grid and a move strategy."""

from __future__ import annotations

import logging

from snake_agent.config import AgentConfig
from snake_agent.grid import OccupancyGrid
from snake_agent.state import GameState
from snake_agent.strategy import MoveDecision, get_strategy

logger = logging.getLogger(__name__)


class SnakeAgent:
    """Answers the four Battlesnake callbacks.

    The agent keeps only its configuration and a stateless strategy. Each
    call to :meth:`move` builds a fresh grid, so one agent can play many
    games at once.
    """

    def __init__(self, config: AgentConfig | None = None) -> None:
        self.config = config if config is not None else AgentConfig()
        self.strategy = get_strategy(self.config.strategy)
        self.policy = self.config.policy

    def info(self) -> dict:
        """Return the appearance payload for the root endpoint."""
        logger.info("INFO")
        cfg = self.config
        return {
            "apiversion": cfg.apiversion,
            "author": cfg.author,
            "color": cfg.color,
            "head": cfg.head,
            "tail": cfg.tail,
        }

    def start(self, state: GameState) -> None:
        logger.info("%s START", state.game_id)

    def end(self, state: GameState) -> None:
        logger.info("%s END", state.game_id)

    def move(self, state: GameState) -> MoveDecision:
        """Pick this turn's move.

        Raises :class:`~snake_agent.grid.CoordinateOutOfBounds` if any body
        segment lies off the board.
        """
        grid = OccupancyGrid.from_state(state)
        head = state.you.head
        moves = grid.evaluate_neighbors(head, self.policy)
        decision = self.strategy.choose(moves, head, state.board.food)

        if not decision.safe:
            logger.warning(
                "%s turn %d: no safe move from (%d, %d), playing %s.",
                state.game_id, state.turn, head.x, head.y,
                decision.direction.value,
            )
        else:
            logger.debug(
                "%s turn %d: %s", state.game_id, state.turn,
                decision.direction.value,
            )
        return decision
