"""Views for the project activity custom graph."""

from __future__ import annotations

import logging
from typing import Any

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render

from activity.dialog import AddGraphMetricDialog
from activity.forms import AddGraphMetricForm, RemoveGraphMetricForm
from activity.session import load_custom_graph, load_dialog_state, store_custom_graph, store_dialog_state
from activity.sources import get_message_bundle, get_metric_catalog
from measures.catalog import MetricCatalog
from measures.custom_graph import CustomGraph
from measures.l10n import MessageBundle
from measures.metric_options import metric_label
from measures.selection_limit import MAX_GRAPH_METRICS

logger = logging.getLogger(__name__)

_TEXT_KEYS: dict[str, str] = {
    "title": "project_activity.graphs.custom",
    "add": "project_activity.graphs.custom.add",
    "add_metric": "project_activity.graphs.custom.add_metric",
    "add_metric_info": "project_activity.graphs.custom.add_metric_info",
    "no_metrics": "project_activity.graphs.custom.no_metrics",
    "search": "project_activity.graphs.custom.search",
    "select": "project_activity.graphs.custom.select",
    "no_results": "no_results",
    "cancel": "cancel",
    "remove": "remove",
}


def _series_label(key: str, *, catalog: MetricCatalog, bundle: MessageBundle) -> str:
    """Return the display label for a selected metric key."""

    metric = catalog.get(key)
    if metric is None:
        return key
    return metric_label(metric, translate=bundle.translate)


def _build_dialog(
    request: HttpRequest,
    *,
    catalog: MetricCatalog,
    bundle: MessageBundle,
    graph: CustomGraph,
) -> AddGraphMetricDialog:
    """Rebuild the add-metric dialog from the session for this request."""

    return AddGraphMetricDialog(
        metrics=catalog,
        selected_metrics=graph.metrics,
        metrics_type_filter=graph.metrics_type_filter(catalog),
        add_metric=graph.add_metric,
        state=load_dialog_state(request),
        translate=bundle.translate,
        translate_with_parameters=bundle.translate_with_parameters,
    )


def _pick_from_post(request: HttpRequest, *, dialog: AddGraphMetricDialog, bundle: MessageBundle) -> bool:
    """Validate the posted metric against the dialog options and pick it."""

    form = AddGraphMetricForm(request.POST, options=dialog.options())
    if not form.is_valid():
        messages.error(request, bundle.translate("project_activity.graphs.custom.invalid_metric"))
        return False
    return dialog.pick(form.cleaned_data["metric"])


def _apply_action(
    request: HttpRequest,
    action: str,
    *,
    dialog: AddGraphMetricDialog,
    graph: CustomGraph,
    catalog: MetricCatalog,
    bundle: MessageBundle,
) -> None:
    """Apply one posted action to the dialog or the custom graph."""

    if action == "open":
        if not dialog.open() and not dialog.trigger_enabled:
            messages.warning(request, bundle.translate("project_activity.graphs.custom.limit_reached"))
        return

    if action == "pick":
        if dialog.is_open:
            _pick_from_post(request, dialog=dialog, bundle=bundle)
        return

    if action == "submit":
        if not dialog.is_open:
            return
        if (request.POST.get("metric") or "").strip() and not _pick_from_post(request, dialog=dialog, bundle=bundle):
            return
        pending = dialog.pending
        if pending not in {option.value for option in dialog.options()}:
            messages.error(request, bundle.translate("project_activity.graphs.custom.invalid_metric"))
            return
        if pending is None or not dialog.submit():
            messages.error(request, bundle.translate("project_activity.graphs.custom.invalid_metric"))
            return
        label = _series_label(pending, catalog=catalog, bundle=bundle)
        messages.success(request, bundle.translate_with_parameters("project_activity.graphs.custom.added", label))
        return

    if action == "cancel":
        dialog.cancel()
        return

    if action == "remove":
        not_on_graph = bundle.translate("project_activity.graphs.custom.not_on_graph")
        form = RemoveGraphMetricForm(
            request.POST,
            selected_metrics=graph.metrics,
            not_on_graph_message=not_on_graph,
        )
        if not form.is_valid():
            messages.warning(request, not_on_graph)
            return
        key = form.cleaned_data["metric"]
        graph.remove_metric(key)
        label = _series_label(key, catalog=catalog, bundle=bundle)
        messages.success(request, bundle.translate_with_parameters("project_activity.graphs.custom.removed", label))
        return

    logger.warning("Unknown custom graph action %r", action)
    messages.error(request, "Unknown action.")


@login_required
def custom_graph(request: HttpRequest) -> HttpResponse:
    """Render the custom graph and handle its add-metric dialog actions."""

    catalog = get_metric_catalog()
    bundle = get_message_bundle()
    graph = load_custom_graph(request)
    dialog = _build_dialog(request, catalog=catalog, bundle=bundle, graph=graph)

    if request.method == "POST":
        action = (request.POST.get("action") or "").strip()
        _apply_action(request, action, dialog=dialog, graph=graph, catalog=catalog, bundle=bundle)
        store_custom_graph(request, graph)
        store_dialog_state(request, dialog.state)
        return redirect("activity:custom_graph")

    series = [
        {"key": key, "label": _series_label(key, catalog=catalog, bundle=bundle)}
        for key in graph.metrics
    ]
    context: dict[str, Any] = {
        "series": series,
        "dialog_open": dialog.is_open,
        "trigger_enabled": dialog.trigger_enabled,
        "submit_enabled": dialog.submit_enabled,
        "max_metrics": MAX_GRAPH_METRICS,
        "text": {name: bundle.translate(key) for name, key in _TEXT_KEYS.items()},
    }
    if dialog.is_open:
        options = dialog.options()
        context["options"] = options
        context["type_filter_note"] = dialog.type_filter_note()
        context["add_form"] = AddGraphMetricForm(options=options, initial={"metric": dialog.pending})
        context["pending"] = dialog.pending
    return render(request, "activity/custom_graph.html", context)
