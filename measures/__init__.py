"""Pure measures package for project activity graphs.

This package describes metrics, filters the catalog into selectable options,
and owns the custom graph selection. It must not import Django or perform any
database I/O.
"""

from .metric_options import metric_options
from .selection_limit import MAX_GRAPH_METRICS, can_add_metric

__all__ = ["MAX_GRAPH_METRICS", "can_add_metric", "metric_options"]
