"""App configuration for the `seer` Django app."""

from __future__ import annotations

from django.apps import AppConfig


class SeerConfig(AppConfig):
    """Configuration for the `seer` app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "seer"
    verbose_name = "Seer charts"
