"""State machine for the custom graph "add metric" dialog.

The dialog is either closed or open with at most one pending pick. Actions the
user cannot perform (opening past the series limit, submitting without a pick)
are disabled affordances: the corresponding transition is inert and reports
that it did not fire instead of raising.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Final

from measures.l10n import translate as default_translate
from measures.l10n import translate_with_parameters as default_translate_with_parameters
from measures.metric_options import MetricOption, Translate, metric_options, type_filter_note
from measures.metrics import Metric
from measures.selection_limit import can_add_metric

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DialogClosed:
    """The dialog is not shown and holds no pending pick."""


@dataclass(frozen=True, slots=True)
class DialogOpen:
    """The dialog is shown.

    Args:
        pending: Tentatively picked metric key, or None before the first pick.
    """

    pending: str | None = None


DialogState = DialogClosed | DialogOpen

CLOSED: Final[DialogClosed] = DialogClosed()


class AddGraphMetricDialog:
    """Drive the add-metric dialog for one custom graph.

    Args:
        metrics: Metric catalog in display order.
        selected_metrics: Keys already on the graph. Held by reference so every
            read reflects the owner's latest selection.
        metrics_type_filter: Optional allowed metric types.
        add_metric: Callback invoked once per successful submit.
        state: Initial dialog state.
        translate: Message lookup for labels.
        translate_with_parameters: Parameterized message lookup for the note.
    """

    def __init__(
        self,
        *,
        metrics: Iterable[Metric],
        selected_metrics: Sequence[str],
        metrics_type_filter: Sequence[str] | None,
        add_metric: Callable[[str], None],
        state: DialogState = CLOSED,
        translate: Translate = default_translate,
        translate_with_parameters: Translate = default_translate_with_parameters,
    ) -> None:
        self._metrics = tuple(metrics)
        self._selected_metrics = selected_metrics
        self._metrics_type_filter = metrics_type_filter
        self._add_metric = add_metric
        self._state: DialogState = state
        self._translate = translate
        self._translate_with_parameters = translate_with_parameters

    @property
    def state(self) -> DialogState:
        return self._state

    @property
    def is_open(self) -> bool:
        return isinstance(self._state, DialogOpen)

    @property
    def pending(self) -> str | None:
        if isinstance(self._state, DialogOpen):
            return self._state.pending
        return None

    @property
    def trigger_enabled(self) -> bool:
        """Whether the button that opens the dialog is enabled."""

        return can_add_metric(len(self._selected_metrics))

    @property
    def submit_enabled(self) -> bool:
        """Whether the dialog's submit button is enabled."""

        return self.pending is not None

    def options(self) -> tuple[MetricOption, ...]:
        """Return the picker options for the current selection and type filter."""

        return metric_options(
            self._metrics,
            selected_metrics=self._selected_metrics,
            metrics_type_filter=self._metrics_type_filter,
            translate=self._translate,
        )

    def type_filter_note(self) -> str | None:
        return type_filter_note(
            self._metrics_type_filter,
            translate=self._translate,
            translate_with_parameters=self._translate_with_parameters,
        )

    def open(self) -> bool:
        """Open the dialog with no pending pick."""

        if self.is_open or not self.trigger_enabled:
            return False
        self._state = DialogOpen()
        logger.debug("Add metric dialog opened")
        return True

    def pick(self, metric_key: str) -> bool:
        """Record a tentative pick, replacing any previous one."""

        if not self.is_open:
            return False
        self._state = DialogOpen(pending=metric_key)
        logger.debug("Add metric dialog picked %r", metric_key)
        return True

    def cancel(self) -> bool:
        """Close the dialog and discard the pending pick."""

        if not self.is_open:
            return False
        self._state = CLOSED
        logger.debug("Add metric dialog cancelled")
        return True

    def submit(self) -> bool:
        """Commit the pending pick through the callback and close the dialog."""

        pending = self.pending
        if pending is None:
            return False
        self._add_metric(pending)
        self._state = CLOSED
        logger.info("Add metric dialog committed %r", pending)
        return True
