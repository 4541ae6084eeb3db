"""Mailchimp marketing API integration."""

import logging
import re

from rest_framework import status

from espconnect.conf import get_lists_page_size, get_mailchimp_api_domain
from espconnect.enums import ErrorKind
from espconnect.providers import ClassifiedError, ConnectionValidation, ListsResult

from .base import PROVIDER_FAILURES, BaseProviderClient

logger = logging.getLogger(__name__)

# The prefix becomes the leftmost label of the API host.
SERVER_PREFIX_PATTERN = re.compile(r"[a-z0-9]+", re.IGNORECASE)


def derive_server_prefix(api_key: str) -> str:
    """
    Return the datacenter prefix of a Mailchimp API key.

    Mailchimp keys end with ``-<server prefix>`` (e.g. ``abcd1234-us6``). A key
    without any dash is used whole as the prefix.
    """
    return api_key.rsplit("-", 1)[-1]


class MailchimpClient(BaseProviderClient):
    """
    Mailchimp marketing API integration.

    Authenticates with HTTP basic auth, any username being accepted with the
    API key as password. The API host depends on the key datacenter, a key
    whose prefix is not a plain host label is rejected without any call.
    """

    name = "mailchimp"
    unauthorized_message = "Invalid API key"
    default_error_message = "Mailchimp API error"

    def __init__(self, api_key: str, timeout: int | None = None):
        """Configure the client and derive the API endpoint from the key."""
        super().__init__(api_key, timeout=timeout)
        self.server_prefix = derive_server_prefix(api_key)
        self.has_valid_server_prefix = SERVER_PREFIX_PATTERN.fullmatch(self.server_prefix) is not None
        if self.has_valid_server_prefix:
            self.base_url = f"https://{self.server_prefix}.{get_mailchimp_api_domain()}/3.0"

    def get_request_kwargs(self) -> dict:
        """Authenticate with basic auth."""
        return {"auth": ("anystring", self._api_key)}

    def extract_error_message(self, payload: dict) -> str | None:
        """Mailchimp errors follow the problem details format."""
        return payload.get("detail") or payload.get("title")

    def reject_server_prefix(self, operation: str) -> ClassifiedError:
        """Report a key whose server prefix cannot be used as an API host."""
        logger.warning("%s %s failed: invalid server prefix", self.name, operation)
        return ClassifiedError(ErrorKind.UNAUTHORIZED, self.unauthorized_message, status.HTTP_401_UNAUTHORIZED)

    def validate_connection(self) -> ConnectionValidation:
        """Validate the key by fetching the API root, which describes the account."""
        if not self.has_valid_server_prefix:
            return ConnectionValidation(is_valid=False, error=self.reject_server_prefix("connection validation"))

        try:
            account = self.get("/")
            account_info = {
                "accountId": account.get("account_id"),
                "accountName": account.get("account_name"),
                "email": account.get("email"),
                "role": account.get("role"),
            }
        except PROVIDER_FAILURES as exc:
            return ConnectionValidation(is_valid=False, error=self.fail("connection validation", exc))

        return ConnectionValidation(is_valid=True, account_info=account_info)

    def get_lists(self) -> ListsResult:
        """Fetch audiences, their statistics are embedded in the response."""
        if not self.has_valid_server_prefix:
            return ListsResult(success=False, error=self.reject_server_prefix("lists retrieval"))

        try:
            response = self.get("/lists", params={"count": get_lists_page_size()})
            lists = [
                {
                    "id": audience["id"],
                    "name": audience["name"],
                    "memberCount": audience["stats"]["member_count"],
                    "subscribedCount": audience["stats"]["member_count"],
                    "unsubscribedCount": audience["stats"]["unsubscribe_count"],
                    "cleanedCount": audience["stats"]["cleaned_count"],
                    "createdAt": audience.get("date_created"),
                    "webId": audience.get("web_id"),
                }
                for audience in response["lists"]
            ]
        except PROVIDER_FAILURES as exc:
            return ListsResult(success=False, error=self.fail("lists retrieval", exc))

        return ListsResult(success=True, lists=lists)
