"""Maximum number of series on one custom graph."""

from __future__ import annotations

from typing import Final

MAX_GRAPH_METRICS: Final[int] = 6


def can_add_metric(selected_count: int, *, ceiling: int = MAX_GRAPH_METRICS) -> bool:
    """Return True when another metric may be added to the graph."""

    return selected_count < ceiling
