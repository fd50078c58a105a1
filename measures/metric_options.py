"""Selectable metric options for the custom graph "add metric" dialog."""

from __future__ import annotations

from collections.abc import Callable, Collection, Iterable, Sequence
from dataclasses import dataclass

from .l10n import translate as default_translate
from .l10n import translate_with_parameters as default_translate_with_parameters
from .metrics import Metric, is_diff_metric

TYPE_FILTER_MESSAGE_KEY = "project_activity.graphs.custom.type_x_message"

Translate = Callable[..., str]


@dataclass(frozen=True, slots=True)
class MetricOption:
    """One entry of the metric picker.

    Args:
        value: Metric key submitted when the option is picked.
        label: Display label.
    """

    value: str
    label: str


def metric_label(metric: Metric, *, translate: Translate = default_translate) -> str:
    """Return the display label for a metric.

    Custom metrics are labeled with their own name; built-in metrics use the
    translated `metric.<key>.name` message.
    """

    if metric.custom:
        return metric.name
    return translate("metric", metric.key, "name")


def metric_options(
    metrics: Iterable[Metric],
    *,
    selected_metrics: Collection[str],
    metrics_type_filter: Sequence[str] | None = None,
    translate: Translate = default_translate,
) -> tuple[MetricOption, ...]:
    """Filter a metric catalog down to the options a user may add.

    Hidden metrics and diff metrics are never offered. With a non-empty type
    filter, only metrics of those types that are not already selected remain.
    Without a type filter every remaining metric is offered, including ones
    already on the graph.

    Args:
        metrics: Catalog metrics in display order.
        selected_metrics: Metric keys already plotted on the graph.
        metrics_type_filter: Optional allowed metric types.
        translate: Message lookup used for built-in metric labels.

    Returns:
        Options in catalog order.
    """

    options: list[MetricOption] = []
    for metric in metrics:
        if metric.hidden or is_diff_metric(metric.key):
            continue
        if metrics_type_filter:
            if metric.type not in metrics_type_filter or metric.key in selected_metrics:
                continue
        options.append(MetricOption(value=metric.key, label=metric_label(metric, translate=translate)))
    return tuple(options)


def type_filter_note(
    metrics_type_filter: Sequence[str] | None,
    *,
    translate: Translate = default_translate,
    translate_with_parameters: Translate = default_translate_with_parameters,
) -> str | None:
    """Return the note explaining which metric types are available.

    Returns:
        The rendered message, or None when no type filter applies.
    """

    if not metrics_type_filter:
        return None
    type_names = sorted(translate("metric.type", str(metric_type)) for metric_type in metrics_type_filter)
    return translate_with_parameters(TYPE_FILTER_MESSAGE_KEY, ", ".join(type_names))
