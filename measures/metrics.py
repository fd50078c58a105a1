"""Metric records consumed by project activity graphs.

Metrics are supplied in full by the catalog. Nothing in this package creates,
mutates, or deletes a metric after the catalog is loaded.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final

DIFF_METRIC_PREFIX: Final[str] = "new_"


class MetricType(StrEnum):
    """Value type tag of a metric.

    Values are stable identifiers shared by the catalog file and the message
    bundle (`metric.type.<value>`).
    """

    INT = "INT"
    FLOAT = "FLOAT"
    PERCENT = "PERCENT"
    RATING = "RATING"
    WORK_DUR = "WORK_DUR"
    MILLISEC = "MILLISEC"
    LEVEL = "LEVEL"
    BOOL = "BOOL"
    STRING = "STRING"
    DATA = "DATA"
    DISTRIB = "DISTRIB"


@dataclass(frozen=True, slots=True)
class Metric:
    """Describe one measurable quantity available for graphing.

    Args:
        key: Stable unique identifier.
        name: Display name; used verbatim as the label for custom metrics.
        type: Value type tag.
        hidden: When True the metric is excluded from every picker.
        custom: When True `name` is the label instead of a translated one.
    """

    key: str
    name: str
    type: MetricType
    hidden: bool = False
    custom: bool = False


def is_diff_metric(metric_key: str) -> bool:
    """Return True when a metric key names a delta ("new code") variant."""

    return metric_key.startswith(DIFF_METRIC_PREFIX)
