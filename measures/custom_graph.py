"""Custom graph configuration: the series a user chose to plot.

The custom graph owns the selection. The "add metric" dialog only reads it and
appends to it through `CustomGraph.add_metric`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from .catalog import MetricCatalog

logger = logging.getLogger(__name__)


class CustomGraph:
    """Ordered, duplicate-free list of metric keys plotted on a custom graph."""

    def __init__(self, metrics: Iterable[str] = ()) -> None:
        self.metrics: list[str] = []
        for key in metrics:
            if key not in self.metrics:
                self.metrics.append(key)

    def __len__(self) -> int:
        return len(self.metrics)

    def add_metric(self, key: str) -> None:
        """Append a metric series; keys already on the graph are ignored."""

        if key in self.metrics:
            logger.debug("Metric %r is already on the custom graph", key)
            return
        self.metrics.append(key)
        logger.info("Added metric %r to the custom graph (%d series)", key, len(self.metrics))

    def remove_metric(self, key: str) -> bool:
        """Remove a metric series.

        Returns:
            True when the metric was on the graph.
        """

        if key not in self.metrics:
            return False
        self.metrics.remove(key)
        logger.info("Removed metric %r from the custom graph (%d series)", key, len(self.metrics))
        return True

    def metrics_type_filter(self, catalog: MetricCatalog) -> tuple[str, ...] | None:
        """Return the metric types new series must match.

        Every series on a custom graph shares one scale, so once a metric is
        selected only metrics of the selected types may be added. Types are
        distinct and in selection order; None when nothing is selected.
        """

        types: list[str] = []
        for key in self.metrics:
            metric = catalog.get(key)
            if metric is None:
                continue
            if str(metric.type) not in types:
                types.append(str(metric.type))
        return tuple(types) or None

    def to_payload(self) -> list[str]:
        """Return a JSON-safe representation."""

        return list(self.metrics)

    @classmethod
    def from_payload(cls, payload: Any) -> CustomGraph:
        """Rebuild a CustomGraph from `to_payload` output; bad payloads give an empty graph."""

        if not isinstance(payload, list):
            return cls()
        return cls(str(key) for key in payload if isinstance(key, str) and key)
