"""Test the integration model and its store."""

import pytest
from django.db import IntegrityError

from espconnect.models import Integration
from tests import factories

pytestmark = pytest.mark.django_db


def test_upsert_creates_integration():
    """A first upsert creates an active integration."""
    integration = Integration.objects.upsert("mailchimp", "abcd1234-us6", {"accountId": "acc"})

    assert Integration.objects.count() == 1
    integration.refresh_from_db()
    assert integration.provider == "mailchimp"
    assert integration.api_key == "abcd1234-us6"
    assert integration.server_prefix == "us6"
    assert integration.is_active is True
    assert integration.account_info == {"accountId": "acc"}
    assert integration.last_validated is not None


def test_upsert_updates_existing_integration():
    """An upsert on an existing provider updates the same record."""
    existing = factories.IntegrationFactory(mailchimp=True, is_active=False)

    integration = Integration.objects.upsert("mailchimp", "efgh5678-us21", {"accountId": "other"})

    assert integration.pk == existing.pk
    assert Integration.objects.count() == 1
    integration.refresh_from_db()
    assert integration.server_prefix == "us21"
    assert integration.is_active is True
    assert integration.account_info == {"accountId": "other"}


def test_upsert_getresponse_has_no_server_prefix():
    """The server prefix only applies to Mailchimp."""
    integration = Integration.objects.upsert("getresponse", "gr-secret-key", {})

    assert integration.server_prefix == ""


def test_for_provider():
    """Integrations are looked up by provider, optionally active only."""
    inactive = factories.IntegrationFactory(provider="getresponse", is_active=False)

    assert Integration.objects.for_provider("getresponse") == inactive
    assert Integration.objects.for_provider("getresponse", active_only=True) is None
    assert Integration.objects.for_provider("mailchimp") is None


def test_provider_is_unique():
    """The storage refuses a second record for the same provider."""
    Integration.objects.create(provider="mailchimp", api_key="abcd1234-us6")

    with pytest.raises(IntegrityError):
        Integration.objects.create(provider="mailchimp", api_key="efgh5678-us21")


def test_set_api_key_recomputes_server_prefix():
    """Changing the credential recomputes the derived prefix."""
    integration = Integration(provider="mailchimp")

    integration.set_api_key("abcd1234-us6")
    assert integration.server_prefix == "us6"

    integration.set_api_key("nodash")
    assert integration.server_prefix == "nodash"


def test_str():
    """The integration is displayed by its provider name."""
    assert str(Integration(provider="getresponse")) == "GetResponse"
