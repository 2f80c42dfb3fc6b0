"""Agent configuration: appearance and move-selection settings."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, replace
from pathlib import Path

from snake_agent.grid import BoundaryPolicy
from snake_agent.strategy import STRATEGIES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AgentConfig:
    """Static agent settings.

    Supports JSON serialization so a deployed snake can be reconfigured
    without code changes.
    """

    # Appearance, reported from the info endpoint
    apiversion: str = "1"
    author: str = "snake-agent"
    color: str = "#cc241d"
    head: str = "default"
    tail: str = "default"

    # Move selection
    strategy: str = "safe"
    boundary_policy: str = "strict"

    def __post_init__(self) -> None:
        if self.strategy not in STRATEGIES:
            choices = ", ".join(sorted(STRATEGIES))
            raise ValueError(
                f"Unknown strategy {self.strategy!r}; expected one of: {choices}.",
            )
        try:
            BoundaryPolicy(self.boundary_policy)
        except ValueError as exc:
            raise ValueError(
                f"Unknown boundary policy {self.boundary_policy!r}.",
            ) from exc

    @property
    def policy(self) -> BoundaryPolicy:
        return BoundaryPolicy(self.boundary_policy)

    def with_overrides(self, **overrides) -> AgentConfig:
        """Return a copy with the non-``None`` overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> AgentConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
