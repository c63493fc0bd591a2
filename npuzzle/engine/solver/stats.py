from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SearchStats:
    """Counters collected while a solver runs."""

    expanded: int = 0
    enqueued: int = 0
    pruned: int = 0
    max_frontier: int = 0
    elapsed: float = 0.0

    def as_dict(self) -> dict[str, float]:
        return {
            "expanded": self.expanded,
            "enqueued": self.enqueued,
            "pruned": self.pruned,
            "max_frontier": self.max_frontier,
            "elapsed": round(self.elapsed, 4),
        }
