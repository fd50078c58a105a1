"""Pytest fixtures shared across the test suite."""

from __future__ import annotations

from collections.abc import Sequence

import pytest
from django.contrib.auth import get_user_model

from measures.catalog import MetricCatalog
from measures.l10n import MessageBundle
from measures.metrics import Metric, MetricType


@pytest.fixture
def user(db):
    """Return a user that can log in."""

    user_model = get_user_model()
    return user_model.objects.create_user(username="alice", password="password")


@pytest.fixture
def auth_client(client, user):
    """Return a Django test client authenticated as the default test user."""

    client.force_login(user)
    return client


@pytest.fixture
def bundle() -> MessageBundle:
    """Return a small message bundle covering the sample catalog."""

    return MessageBundle(
        {
            "metric.A.name": "Metric A",
            "metric.C.name": "Metric C",
            "metric.type.INT": "Integer",
            "metric.type.PERCENT": "Percent",
            "project_activity.graphs.custom.type_x_message": 'Only "{0}" metrics are available.',
        }
    )


@pytest.fixture
def sample_catalog() -> MetricCatalog:
    """Return a catalog with hidden, diff, custom and mixed-type metrics."""

    return MetricCatalog(
        (
            Metric(key="A", name="A", type=MetricType.INT),
            Metric(key="B", name="B", type=MetricType.INT, hidden=True),
            Metric(key="new_A", name="New A", type=MetricType.INT),
            Metric(key="C", name="C", type=MetricType.PERCENT),
            Metric(key="team_size", name="Team size", type=MetricType.INT, custom=True),
        )
    )


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no database access.
    - `integration`: tests touching Django, the database, or views.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
