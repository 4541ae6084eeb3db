"""Provider clients module."""

from dataclasses import dataclass, field

from espconnect.enums import ErrorKind


@dataclass
class ClassifiedError:
    """A provider failure translated to the uniform error shape."""

    kind: ErrorKind
    message: str
    status_code: int


@dataclass
class ConnectionValidation:
    """Outcome of validating a credential against a provider."""

    is_valid: bool
    account_info: dict = field(default_factory=dict)
    error: ClassifiedError | None = None


@dataclass
class ListsResult:
    """Outcome of fetching the lists of a provider account."""

    success: bool
    lists: list[dict] = field(default_factory=list)
    error: ClassifiedError | None = None
