"""Settings of the ESP integrations app, with their defaults."""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


def get_http_timeout() -> int:
    """Return the timeout in seconds applied to every outbound provider call."""
    return getattr(settings, "ESPCONNECT_HTTP_TIMEOUT", 10)


def get_lists_page_size() -> int:
    """Return the page size requested when fetching lists in a single call."""
    return getattr(settings, "ESPCONNECT_LISTS_PAGE_SIZE", 1000)


def get_stats_max_workers() -> int:
    """Return the maximum number of concurrent statistics calls."""
    max_workers = getattr(settings, "ESPCONNECT_STATS_MAX_WORKERS", 10)
    if max_workers < 1:
        raise ImproperlyConfigured("settings.ESPCONNECT_STATS_MAX_WORKERS must be at least 1")
    return max_workers


def get_mailchimp_api_domain() -> str:
    """Return the Mailchimp API domain the server prefix is prepended to."""
    return getattr(settings, "ESPCONNECT_MAILCHIMP_API_DOMAIN", "api.mailchimp.com")


def get_getresponse_api_url() -> str:
    """Return the GetResponse API base URL."""
    return getattr(settings, "ESPCONNECT_GETRESPONSE_API_URL", "https://api.getresponse.com/v3")
