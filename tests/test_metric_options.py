"""Unit tests for filtering the metric catalog into picker options."""

from __future__ import annotations

import pytest

from measures.metric_options import MetricOption, metric_label, metric_options, type_filter_note
from measures.metrics import Metric, MetricType, is_diff_metric

pytestmark = pytest.mark.unit


def test_metric_options_excludes_hidden_and_diff_metrics(sample_catalog, bundle) -> None:
    """Hidden and `new_` metrics never become options, with a type filter set."""

    options = metric_options(
        sample_catalog,
        selected_metrics=(),
        metrics_type_filter=("INT",),
        translate=bundle.translate,
    )
    assert [option.value for option in options] == ["A", "team_size"]
    assert options[0] == MetricOption(value="A", label="Metric A")


def test_metric_options_without_type_filter_keeps_selected_metrics(sample_catalog, bundle) -> None:
    """Without a type filter already-selected metrics remain selectable."""

    options = metric_options(
        sample_catalog,
        selected_metrics=("A",),
        metrics_type_filter=None,
        translate=bundle.translate,
    )
    assert [option.value for option in options] == ["A", "C", "team_size"]


def test_metric_options_empty_type_filter_behaves_like_no_filter(sample_catalog, bundle) -> None:
    """An empty type filter applies no type or selection restriction."""

    options = metric_options(sample_catalog, selected_metrics=("A",), metrics_type_filter=(), translate=bundle.translate)
    assert [option.value for option in options] == ["A", "C", "team_size"]


def test_metric_options_type_filter_excludes_selected_and_other_types(sample_catalog, bundle) -> None:
    """With a type filter only unselected metrics of allowed types remain."""

    options = metric_options(
        sample_catalog,
        selected_metrics=("A",),
        metrics_type_filter=("INT",),
        translate=bundle.translate,
    )
    assert [option.value for option in options] == ["team_size"]

    percent = metric_options(
        sample_catalog,
        selected_metrics=(),
        metrics_type_filter=("PERCENT",),
        translate=bundle.translate,
    )
    assert [option.value for option in percent] == ["C"]


def test_metric_options_preserve_catalog_order(bundle) -> None:
    """Options follow catalog iteration order, not alphabetical order."""

    metrics = (
        Metric(key="zeta", name="zeta", type=MetricType.INT),
        Metric(key="alpha", name="alpha", type=MetricType.INT),
    )
    options = metric_options(metrics, selected_metrics=(), translate=bundle.translate)
    assert [option.value for option in options] == ["zeta", "alpha"]


def test_metric_label_uses_name_for_custom_metrics(bundle) -> None:
    """Custom metrics keep their own name; others use the translated name."""

    custom = Metric(key="team_size", name="Team size", type=MetricType.INT, custom=True)
    builtin = Metric(key="A", name="ignored", type=MetricType.INT)
    missing = Metric(key="D", name="ignored", type=MetricType.INT)

    assert metric_label(custom, translate=bundle.translate) == "Team size"
    assert metric_label(builtin, translate=bundle.translate) == "Metric A"
    assert metric_label(missing, translate=bundle.translate) == "metric.D.name"


def test_is_diff_metric_uses_new_prefix() -> None:
    """Only keys starting with `new_` are diff metrics."""

    assert is_diff_metric("new_coverage") is True
    assert is_diff_metric("coverage") is False
    assert is_diff_metric("renew_count") is False


def test_type_filter_note_sorts_translated_types(bundle) -> None:
    """The note lists translated type names sorted and comma-joined."""

    note = type_filter_note(
        ("PERCENT", "INT"),
        translate=bundle.translate,
        translate_with_parameters=bundle.translate_with_parameters,
    )
    assert note == 'Only "Integer, Percent" metrics are available.'


def test_type_filter_note_is_none_without_filter(bundle) -> None:
    """No note is rendered without a type filter."""

    assert type_filter_note(None, translate=bundle.translate) is None
    assert type_filter_note((), translate=bundle.translate) is None
