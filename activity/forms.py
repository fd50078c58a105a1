"""Forms for the custom graph workflows."""

from __future__ import annotations

from collections.abc import Sequence

from django import forms

from measures.metric_options import MetricOption


class AddGraphMetricForm(forms.Form):
    """Validate a metric picked in the add-metric dialog."""

    metric = forms.ChoiceField(choices=())

    def __init__(self, *args, options: Sequence[MetricOption] = (), **kwargs) -> None:
        """Initialize with the options currently offered by the dialog."""

        super().__init__(*args, **kwargs)
        self.fields["metric"].choices = [(option.value, option.label) for option in options]


class RemoveGraphMetricForm(forms.Form):
    """Validate a series removal from the custom graph."""

    metric = forms.CharField(max_length=200)

    def __init__(
        self,
        *args,
        selected_metrics: Sequence[str] = (),
        not_on_graph_message: str = "project_activity.graphs.custom.not_on_graph",
        **kwargs,
    ) -> None:
        """Initialize with the metric keys currently on the graph and the error text."""

        super().__init__(*args, **kwargs)
        self._selected_metrics = tuple(selected_metrics)
        self._not_on_graph_message = not_on_graph_message

    def clean_metric(self) -> str:
        """Require the metric to be on the graph."""

        metric = str(self.cleaned_data.get("metric") or "").strip()
        if metric not in self._selected_metrics:
            raise forms.ValidationError(self._not_on_graph_message, code="not_on_graph")
        return metric
