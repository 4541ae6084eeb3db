"""Provider client selection."""

from espconnect.enums import Provider
from espconnect.exceptions import InvalidProviderError
from espconnect.providers.base import BaseProviderClient
from espconnect.providers.getresponse import GetResponseClient
from espconnect.providers.mailchimp import MailchimpClient

PROVIDER_CLIENTS: dict[str, type[BaseProviderClient]] = {
    Provider.MAILCHIMP: MailchimpClient,
    Provider.GETRESPONSE: GetResponseClient,
}


def get_provider_client(provider: str, api_key: str) -> BaseProviderClient:
    """
    Instantiate the client of a provider for the given credential.

    A new client is built on each call as it is bound to the credential.

    Raises:
        InvalidProviderError: If the provider is not supported.

    """
    try:
        klass = PROVIDER_CLIENTS[provider]
    except (KeyError, TypeError) as err:
        raise InvalidProviderError() from err
    return klass(api_key)
