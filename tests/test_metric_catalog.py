"""Unit tests for loading the metric catalog."""

from __future__ import annotations

import pytest

from measures.catalog import DEFAULT_METRICS_FILE, MetricCatalog, load_metric_catalog
from measures.metrics import Metric, MetricType, is_diff_metric

pytestmark = pytest.mark.unit


def test_default_catalog_loads_in_file_order() -> None:
    """The packaged catalog loads and keeps file order."""

    catalog = load_metric_catalog(DEFAULT_METRICS_FILE)
    keys = [metric.key for metric in catalog]
    assert keys[0] == "ncloc"
    assert "coverage" in catalog
    assert catalog.get("coverage").type == MetricType.PERCENT
    assert catalog.get("ncloc_language_distribution").hidden is True
    assert catalog.get("team_size").custom is True
    assert any(is_diff_metric(key) for key in keys)


def test_catalog_rejects_duplicate_keys() -> None:
    """Duplicate metric keys are a configuration error."""

    with pytest.raises(ValueError, match="Duplicate metric key"):
        MetricCatalog(
            (
                Metric(key="ncloc", name="a", type=MetricType.INT),
                Metric(key="ncloc", name="b", type=MetricType.INT),
            )
        )


def test_load_catalog_rejects_unknown_type(tmp_path) -> None:
    """Unknown metric types fail loudly with the offending key."""

    path = tmp_path / "metrics.yaml"
    path.write_text("- key: odd\n  name: Odd\n  type: COLOR\n", encoding="utf-8")
    with pytest.raises(ValueError, match="'odd'"):
        load_metric_catalog(path)


def test_load_catalog_requires_a_list(tmp_path) -> None:
    """The catalog file must contain a list of metric mappings."""

    path = tmp_path / "metrics.yaml"
    path.write_text("ncloc: INT\n", encoding="utf-8")
    with pytest.raises(ValueError, match="must contain a list"):
        load_metric_catalog(path)


def test_load_catalog_defaults_optional_fields(tmp_path) -> None:
    """Flags default to False and type tags are case-insensitive."""

    path = tmp_path / "metrics.yaml"
    path.write_text("- key: lines\n  type: int\n", encoding="utf-8")
    catalog = load_metric_catalog(path)
    assert catalog.metrics == (Metric(key="lines", name="lines", type=MetricType.INT),)
