"""Core application configuration."""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Page shells: dashboard, placeholders and health check."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"
