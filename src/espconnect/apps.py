"""ESP integrations application."""

from django.apps import AppConfig


class EspConnectConfig(AppConfig):
    """Configuration class for the ESP integrations app."""

    name = "espconnect"
    verbose_name = "ESP integrations"
