"""Models of the ESP integrations app."""

import uuid

from django.db import models
from django.utils import timezone

from espconnect.enums import Provider
from espconnect.providers.mailchimp import derive_server_prefix


class IntegrationQuerySet(models.QuerySet):
    """Store of integrations, holding at most one record per provider."""

    def for_provider(self, provider: str, active_only: bool = False) -> "Integration | None":
        """Return the integration of a provider, if any."""
        queryset = self.filter(provider=provider)
        if active_only:
            queryset = queryset.filter(is_active=True)
        return queryset.first()

    def upsert(self, provider: str, api_key: str, account_info: dict) -> "Integration":
        """
        Create or update the integration of a provider after a successful validation.

        The lookup and the write are separate steps, concurrent calls for the
        same provider end with the last write.
        """
        integration = self.for_provider(provider)
        if integration is None:
            integration = self.model(provider=provider)
        integration.set_api_key(api_key)
        integration.mark_validated(account_info)
        integration.save()
        return integration


class Integration(models.Model):
    """Credential and connection status of an Email Service Provider account."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    provider = models.CharField("provider", max_length=20, choices=Provider.choices, unique=True)
    api_key = models.CharField("API key", max_length=255)
    server_prefix = models.CharField("server prefix", max_length=50, blank=True)
    is_active = models.BooleanField("active", default=False)
    account_info = models.JSONField("account info", default=dict, blank=True)
    last_validated = models.DateTimeField("last validated", null=True, blank=True)
    created_at = models.DateTimeField("created at", auto_now_add=True)
    updated_at = models.DateTimeField("updated at", auto_now=True)

    objects = IntegrationQuerySet.as_manager()

    class Meta:  # noqa: D106
        verbose_name = "integration"
        verbose_name_plural = "integrations"
        ordering = ("provider",)

    def __str__(self):
        """Return a string representation of the integration."""
        return self.get_provider_display()

    def set_api_key(self, api_key: str):
        """Set the credential and the fields derived from it."""
        self.api_key = api_key
        self.server_prefix = derive_server_prefix(api_key) if self.provider == Provider.MAILCHIMP else ""

    def mark_validated(self, account_info: dict):
        """Record a successful validation against the provider."""
        self.is_active = True
        self.account_info = account_info
        self.last_validated = timezone.now()

    def mark_inactive(self):
        """Record a failed validation against the provider."""
        self.is_active = False
