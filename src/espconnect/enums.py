"""Enums for ESP integrations."""

from enum import StrEnum

from django.db import models


class Provider(models.TextChoices):
    """Email Service Providers an integration can be connected to."""

    MAILCHIMP = "mailchimp", "Mailchimp"
    GETRESPONSE = "getresponse", "GetResponse"


class ErrorKind(StrEnum):
    """Uniform classification of provider failures."""

    UNAUTHORIZED = "unauthorized"
    RATE_LIMITED = "rate_limited"
    NOT_FOUND = "not_found"
    PROVIDER_ERROR = "provider_error"
    NETWORK_ERROR = "network_error"
    UNKNOWN_ERROR = "unknown_error"
