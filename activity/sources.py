"""Process-wide metric catalog and message bundle, configured by settings."""

from __future__ import annotations

from functools import lru_cache

from django.conf import settings

from measures.catalog import MetricCatalog, load_metric_catalog
from measures.l10n import MessageBundle, load_message_bundle


@lru_cache(maxsize=1)
def get_metric_catalog() -> MetricCatalog:
    """Return the metric catalog named by `PROJECT_ACTIVITY_METRICS_FILE`."""

    return load_metric_catalog(settings.PROJECT_ACTIVITY_METRICS_FILE)


@lru_cache(maxsize=1)
def get_message_bundle() -> MessageBundle:
    """Return the message bundle named by `PROJECT_ACTIVITY_MESSAGES_FILE`."""

    return load_message_bundle(settings.PROJECT_ACTIVITY_MESSAGES_FILE)
