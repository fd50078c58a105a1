"""App configuration for the project activity Django app."""

from __future__ import annotations

from django.apps import AppConfig


class ActivityConfig(AppConfig):
    """Configuration for the `activity` app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "activity"
