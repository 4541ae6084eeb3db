"""Provider client base module."""

import logging
from abc import ABC, abstractmethod

import requests
from rest_framework import status

from espconnect.conf import get_http_timeout
from espconnect.enums import ErrorKind
from espconnect.providers import ClassifiedError, ConnectionValidation, ListsResult

logger = logging.getLogger(__name__)

# Failures a provider call can end with: HTTP and transport errors, undecodable
# bodies and payloads missing the expected keys.
PROVIDER_FAILURES = (requests.RequestException, ValueError, KeyError, TypeError, AttributeError)

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again later."
NETWORK_ERROR_MESSAGE = "Network error. Please check your connection."
UNKNOWN_ERROR_MESSAGE = "An unexpected error occurred"


class BaseProviderClient(ABC):
    """
    Base class for all ESP clients.

    Subclasses describe how to authenticate and how to read the provider
    payloads; error classification is shared so every provider surfaces the
    same taxonomy.
    """

    name: str = ""
    base_url: str = ""
    unauthorized_message = "Invalid API key"
    default_error_message = "API error"
    # Only some providers report a missing resource as its own outcome.
    classify_not_found = False

    def __init__(self, api_key: str, timeout: int | None = None):
        """Configure the client with the raw credential."""
        self._api_key = api_key
        self._timeout = timeout or get_http_timeout()

    @abstractmethod
    def validate_connection(self) -> ConnectionValidation:
        """
        Check the credential against the provider account endpoint.

        Returns:
            ConnectionValidation: the normalized account info when valid,
            the classified error otherwise.

        """

    @abstractmethod
    def get_lists(self) -> ListsResult:
        """
        Fetch the mailing lists of the account with their statistics.

        Returns:
            ListsResult: the normalized lists on success, the classified
            error otherwise.

        """

    @abstractmethod
    def get_request_kwargs(self) -> dict:
        """Return the authentication arguments passed to every request."""

    @abstractmethod
    def extract_error_message(self, payload: dict) -> str | None:
        """Return the human readable message of an error payload, if any."""

    def get(self, path: str, params: dict | None = None):
        """Issue an authenticated GET request and return the decoded body."""
        response = requests.get(
            f"{self.base_url}{path}",
            params=params,
            timeout=self._timeout,
            **self.get_request_kwargs(),
        )
        response.raise_for_status()
        return response.json()

    def classify_error(self, exc: Exception) -> ClassifiedError:
        """Translate an exception raised by a provider call to a classified error."""
        response = getattr(exc, "response", None)
        if isinstance(exc, requests.RequestException) and response is not None:
            return self._classify_response(response)

        if isinstance(exc, requests.ConnectionError | requests.Timeout):
            return ClassifiedError(ErrorKind.NETWORK_ERROR, NETWORK_ERROR_MESSAGE, status.HTTP_503_SERVICE_UNAVAILABLE)

        return ClassifiedError(ErrorKind.UNKNOWN_ERROR, UNKNOWN_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)

    def _classify_response(self, response: requests.Response) -> ClassifiedError:
        status_code = response.status_code

        if status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN):
            return ClassifiedError(ErrorKind.UNAUTHORIZED, self.unauthorized_message, status.HTTP_401_UNAUTHORIZED)
        if status_code == status.HTTP_429_TOO_MANY_REQUESTS:
            return ClassifiedError(ErrorKind.RATE_LIMITED, RATE_LIMIT_MESSAGE, status.HTTP_429_TOO_MANY_REQUESTS)
        if status_code == status.HTTP_404_NOT_FOUND and self.classify_not_found:
            return ClassifiedError(ErrorKind.NOT_FOUND, "Resource not found", status.HTTP_404_NOT_FOUND)

        try:
            payload = response.json()
        except ValueError:
            payload = None
        message = self.extract_error_message(payload) if isinstance(payload, dict) else None
        return ClassifiedError(ErrorKind.PROVIDER_ERROR, message or self.default_error_message, status_code)

    def fail(self, operation: str, exc: Exception) -> ClassifiedError:
        """Classify the failure of an operation and log it."""
        error = self.classify_error(exc)
        logger.warning(
            "%s %s failed: %s (status %s)",
            self.name,
            operation,
            error.kind,
            error.status_code,
            exc_info=exc,
        )
        return error
