"""
Integration operations.

Each operation checks its inputs before any provider call, then raises an
`IntegrationError` for every outcome the caller must be told about.
"""

import logging

from espconnect.enums import Provider
from espconnect.exceptions import (
    IntegrationNotFoundError,
    InvalidProviderError,
    MissingFieldError,
    NoActiveIntegrationError,
    ProviderError,
)
from espconnect.handler import get_provider_client
from espconnect.models import Integration

logger = logging.getLogger(__name__)

PROVIDER_QUERY_REQUIRED_MESSAGE = (
    "Provider query parameter is required (e.g., ?provider=mailchimp or ?provider=getresponse)"
)


def _check_provider(provider):
    if provider not in Provider.values:
        raise InvalidProviderError()


def _check_provider_query(provider):
    if not provider:
        raise MissingFieldError(PROVIDER_QUERY_REQUIRED_MESSAGE)
    _check_provider(provider)


def save_integration(provider: str, api_key: str) -> Integration:
    """
    Validate a credential against its provider and store it.

    Nothing is stored when the provider rejects the credential.

    Raises:
        MissingFieldError: If the provider or the API key is missing.
        InvalidProviderError: If the provider is not supported.
        ProviderError: If the credential could not be validated.

    """
    if not provider or not api_key:
        raise MissingFieldError("Provider and API key are required")
    _check_provider(provider)

    validation = get_provider_client(provider, api_key).validate_connection()
    if not validation.is_valid:
        raise ProviderError(validation.error)

    integration = Integration.objects.upsert(provider, api_key, validation.account_info)
    logger.info("%s integration %s saved and validated", provider, integration.pk)
    return integration


def verify_connection(provider: str) -> Integration:
    """
    Validate again the stored credential of a provider.

    The integration is deactivated when the provider now rejects it.

    Raises:
        MissingFieldError: If the provider is missing.
        InvalidProviderError: If the provider is not supported.
        IntegrationNotFoundError: If no integration was ever saved for the provider.
        ProviderError: If the credential could not be validated.

    """
    _check_provider_query(provider)

    integration = Integration.objects.for_provider(provider)
    if integration is None:
        raise IntegrationNotFoundError(
            f"No {provider} integration found. Please connect your account first.",
            connected=False,
        )

    validation = get_provider_client(provider, integration.api_key).validate_connection()
    if not validation.is_valid:
        integration.mark_inactive()
        integration.save(update_fields=["is_active", "updated_at"])
        logger.info("%s integration %s deactivated", provider, integration.pk)
        raise ProviderError(validation.error, connected=False)

    integration.mark_validated(validation.account_info)
    integration.save(update_fields=["is_active", "account_info", "last_validated", "updated_at"])
    return integration


def get_lists(provider: str) -> tuple[Integration, list[dict]]:
    """
    Fetch the mailing lists of the active integration of a provider.

    Raises:
        MissingFieldError: If the provider is missing.
        InvalidProviderError: If the provider is not supported.
        NoActiveIntegrationError: If the provider has no active integration.
        ProviderError: If the lists could not be fetched.

    """
    _check_provider_query(provider)

    integration = Integration.objects.for_provider(provider, active_only=True)
    if integration is None:
        raise NoActiveIntegrationError(
            f"No active {provider} integration found. Please connect your account first."
        )

    result = get_provider_client(provider, integration.api_key).get_lists()
    if not result.success:
        raise ProviderError(result.error)

    return integration, result.lists
