"""Runtime settings for the search engine."""

from __future__ import annotations

import os
from dataclasses import dataclass

from npuzzle.errors import PuzzleError

ENV_NODE_LIMIT = "NPUZZLE_NODE_LIMIT"
ENV_TIME_LIMIT = "NPUZZLE_TIME_LIMIT"
ENV_LOG_LEVEL = "NPUZZLE_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class SearchLimits:
    """Optional bounds on one search; ``None`` means unlimited.

    Limits are checked between expansions and never change which node the
    search picks next.
    """

    node_limit: int | None = None
    time_limit: float | None = None

    def __post_init__(self) -> None:
        if self.node_limit is not None and self.node_limit < 1:
            raise PuzzleError(f"node_limit must be positive, got {self.node_limit}.")
        if self.time_limit is not None and self.time_limit <= 0:
            raise PuzzleError(f"time_limit must be positive, got {self.time_limit}.")

    @property
    def unlimited(self) -> bool:
        return self.node_limit is None and self.time_limit is None

    @classmethod
    def from_env(cls) -> SearchLimits:
        """Build limits from ``NPUZZLE_NODE_LIMIT`` / ``NPUZZLE_TIME_LIMIT``."""
        node_raw = os.environ.get(ENV_NODE_LIMIT, "").strip()
        time_raw = os.environ.get(ENV_TIME_LIMIT, "").strip()
        try:
            node_limit = int(node_raw) if node_raw else None
            time_limit = float(time_raw) if time_raw else None
        except ValueError as exc:
            raise PuzzleError(f"Invalid search limit in environment: {exc}") from exc
        return cls(node_limit=node_limit, time_limit=time_limit)
