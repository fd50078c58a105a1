"""Session storage for the custom graph and its add-metric dialog.

Both values live in the user's session only; they are not persisted beyond it.
"""

from __future__ import annotations

from typing import Any, Final

from django.http import HttpRequest

from activity.dialog import CLOSED, DialogOpen, DialogState
from measures.custom_graph import CustomGraph

DIALOG_SESSION_KEY: Final[str] = "project_activity_add_metric_dialog"
CUSTOM_GRAPH_SESSION_KEY: Final[str] = "project_activity_custom_metrics"


def dialog_state_to_payload(state: DialogState) -> dict[str, Any]:
    """Return a JSON-safe representation of a dialog state."""

    if isinstance(state, DialogOpen):
        return {"open": True, "pending": state.pending}
    return {"open": False}


def dialog_state_from_payload(payload: Any) -> DialogState:
    """Rebuild a dialog state; anything unrecognized is treated as closed."""

    if not isinstance(payload, dict) or not payload.get("open"):
        return CLOSED
    pending = payload.get("pending")
    return DialogOpen(pending=pending if isinstance(pending, str) and pending else None)


def load_dialog_state(request: HttpRequest) -> DialogState:
    """Return the add-metric dialog state stored in the session."""

    return dialog_state_from_payload(request.session.get(DIALOG_SESSION_KEY))


def store_dialog_state(request: HttpRequest, state: DialogState) -> None:
    """Store the add-metric dialog state in the session."""

    request.session[DIALOG_SESSION_KEY] = dialog_state_to_payload(state)
    request.session.modified = True


def load_custom_graph(request: HttpRequest) -> CustomGraph:
    """Return the custom graph stored in the session."""

    return CustomGraph.from_payload(request.session.get(CUSTOM_GRAPH_SESSION_KEY))


def store_custom_graph(request: HttpRequest, graph: CustomGraph) -> None:
    """Store the custom graph in the session."""

    request.session[CUSTOM_GRAPH_SESSION_KEY] = graph.to_payload()
    request.session.modified = True
