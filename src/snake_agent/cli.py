"""Command line tools for inspecting the agent offline."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from snake_agent.config import AgentConfig

logger = logging.getLogger(__name__)

# Unreadable files, malformed JSON, bad values and unknown config keys.
_BAD_INPUT = (OSError, ValueError, TypeError)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-agent",
        description="Snake Agent move evaluation and config tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- move ---
    move_p = sub.add_parser(
        "move", help="Pick a move for a saved game-state JSON file.",
    )
    move_p.add_argument("state", help="Path to a /move request body.")
    move_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON agent config.",
    )
    move_p.add_argument(
        "--strategy", type=str, default=None, choices=["safe", "food"],
    )
    move_p.add_argument(
        "--boundary-policy", type=str, default=None,
        choices=["strict", "inclusive"],
    )

    # --- info ---
    info_p = sub.add_parser("info", help="Print the info response.")
    info_p.add_argument("--config", type=str, default=None)

    # --- init-config ---
    init_p = sub.add_parser(
        "init-config", help="Write the default config to a file.",
    )
    init_p.add_argument("output", help="Destination JSON path.")

    return parser


def _load_config(path: str | None) -> AgentConfig:
    from snake_agent.config import AgentConfig

    return AgentConfig.load(path) if path else AgentConfig()


def _run_move(args: argparse.Namespace) -> int:
    from snake_agent.agent import SnakeAgent
    from snake_agent.grid import CoordinateOutOfBounds
    from snake_agent.server.models import GameStateRequest

    try:
        config = _load_config(args.config).with_overrides(
            strategy=args.strategy, boundary_policy=args.boundary_policy,
        )
    except _BAD_INPUT as exc:
        logger.error("Invalid config in %s: %s", args.config, exc)
        return 2
    try:
        body = GameStateRequest.model_validate_json(
            Path(args.state).read_text(),
        )
        decision = SnakeAgent(config).move(body.to_domain())
    except (*_BAD_INPUT, CoordinateOutOfBounds) as exc:
        logger.error("Invalid game state in %s: %s", args.state, exc)
        return 2

    print(json.dumps({  # noqa: T201
        "move": decision.direction.value, "safe": decision.safe,
    }))
    return 0


def _run_info(args: argparse.Namespace) -> int:
    from snake_agent.agent import SnakeAgent

    try:
        agent = SnakeAgent(_load_config(args.config))
    except _BAD_INPUT as exc:
        logger.error("Invalid config in %s: %s", args.config, exc)
        return 2
    print(json.dumps(agent.info()))  # noqa: T201
    return 0


def _run_init_config(args: argparse.Namespace) -> int:
    from snake_agent.config import AgentConfig

    AgentConfig().save(args.output)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-agent`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "move": _run_move,
        "info": _run_info,
        "init-config": _run_init_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
