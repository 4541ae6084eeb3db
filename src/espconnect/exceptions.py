"""ESP integrations exceptions module."""

from rest_framework import status

SUPPORTED_PROVIDERS_MESSAGE = 'Provider must be either "mailchimp" or "getresponse"'


class IntegrationError(Exception):
    """
    Base exception for all integration errors.

    Carries the message and HTTP status surfaced to the caller, plus any extra
    keys to merge in the error response body.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None, **extra):
        """Initialize the error."""
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.extra = extra


class MissingFieldError(IntegrationError):
    """Exception raised when a required input is missing."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidProviderError(IntegrationError):
    """Exception raised when the provider is not a supported ESP."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = SUPPORTED_PROVIDERS_MESSAGE, **extra):
        """Initialize the error with the supported providers message by default."""
        super().__init__(message, **extra)


class IntegrationNotFoundError(IntegrationError):
    """Exception raised when no integration was ever saved for a provider."""

    status_code = status.HTTP_404_NOT_FOUND


class NoActiveIntegrationError(IntegrationError):
    """Exception raised when the integration for a provider is missing or inactive."""

    status_code = status.HTTP_404_NOT_FOUND


class ProviderError(IntegrationError):
    """Exception raised when the provider rejected or failed a call."""

    def __init__(self, error, **extra):
        """Build the error from a classified provider error."""
        super().__init__(error.message, status_code=error.status_code, **extra)
        self.kind = error.kind
