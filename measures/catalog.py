"""Metric catalog loaded from a YAML definition file.

The catalog is the read-only source of every metric that may be plotted. It
keeps metrics in file order; that order is the order options are offered in.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any, Final

import yaml

from .metrics import Metric, MetricType

logger = logging.getLogger(__name__)

DEFAULT_METRICS_FILE: Final[Path] = Path(__file__).resolve().parent / "data" / "metrics.yaml"


class MetricCatalog:
    """Ordered lookup of metrics by key."""

    def __init__(self, metrics: Iterable[Metric]) -> None:
        """Initialize a catalog from metrics in display order."""

        self._metrics: dict[str, Metric] = {}
        for metric in metrics:
            if metric.key in self._metrics:
                raise ValueError(f"Duplicate metric key: {metric.key!r}")
            self._metrics[metric.key] = metric

    def __iter__(self) -> Iterator[Metric]:
        return iter(self._metrics.values())

    def __len__(self) -> int:
        return len(self._metrics)

    def __contains__(self, key: object) -> bool:
        return key in self._metrics

    def get(self, key: str) -> Metric | None:
        """Return the metric for a key, or None when missing."""

        return self._metrics.get(key)

    @property
    def metrics(self) -> tuple[Metric, ...]:
        """Return all metrics in catalog order."""

        return tuple(self._metrics.values())


def metric_from_mapping(raw: dict[str, Any]) -> Metric:
    """Build a Metric from one catalog file entry.

    Args:
        raw: Mapping with `key`, `name`, `type` and optional flags.

    Returns:
        The parsed Metric.

    Raises:
        ValueError: When required fields are missing or the type is unknown.
    """

    key = str(raw.get("key") or "").strip()
    if not key:
        raise ValueError(f"Metric entry is missing a key: {raw!r}")
    raw_type = str(raw.get("type") or "").strip().upper()
    try:
        metric_type = MetricType(raw_type)
    except ValueError as exc:
        raise ValueError(f"Metric[{key!r}] has unknown type={raw_type!r}.") from exc

    return Metric(
        key=key,
        name=str(raw.get("name") or key),
        type=metric_type,
        hidden=bool(raw.get("hidden", False)),
        custom=bool(raw.get("custom", False)),
    )


def load_metric_catalog(path: Path | str = DEFAULT_METRICS_FILE) -> MetricCatalog:
    """Load a MetricCatalog from a YAML file containing a list of metrics."""

    with Path(path).open(encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or []
    if not isinstance(payload, list):
        raise ValueError(f"Metric catalog {str(path)!r} must contain a list of metrics.")

    metrics = []
    for entry in payload:
        if not isinstance(entry, dict):
            raise ValueError(f"Metric catalog entries must be mappings, got {entry!r}.")
        metrics.append(metric_from_mapping(entry))

    catalog = MetricCatalog(metrics)
    logger.info("Loaded %d metrics from %s", len(catalog), path)
    return catalog
