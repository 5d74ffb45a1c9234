"""Custom exception hierarchy for hi-client."""

from enum import Enum


class HIClientError(Exception):
    """Base exception for all hi-client errors."""


class Violation(str, Enum):
    REQUIRED = "Required"
    NOT_ALLOWED = "NotAllowed"
    AT_LEAST_ONE_REQUIRED = "AtLeastOneRequired"
    INVALID_LENGTH = "InvalidLength"
    INVALID_DATE_TIME = "InvalidDateTime"


class SearchValidationError(HIClientError, ValueError):
    """Raised when a search request does not satisfy its field rules.

    Parameters
    ----------
    field : str
        Dotted path of the offending field (e.g. ``search.familyName``).
    violation : Violation
        Kind of rule that was broken.
    message : str | None
        Override for the default message.
    """

    violation: Violation

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"{field}: {self.violation.value}")


class MissingRequiredFieldError(SearchValidationError):
    """Raised when a mandatory field is absent."""

    violation = Violation.REQUIRED

    def __init__(self, field: str) -> None:
        super().__init__(field, f"{field} is required")


class ForbiddenFieldPresentError(SearchValidationError):
    """Raised when a field that must be absent is populated."""

    violation = Violation.NOT_ALLOWED

    def __init__(self, field: str) -> None:
        super().__init__(field, f"{field} is not allowed for this search")


class AtLeastOneOfRequiredMissingError(SearchValidationError):
    """Raised when none of a set of alternative fields is present."""

    violation = Violation.AT_LEAST_ONE_REQUIRED

    def __init__(self, fields: tuple[str, ...]) -> None:
        self.fields = tuple(fields)
        joined = ", ".join(self.fields)
        super().__init__(joined, f"at least one of {joined} is required")


class InvalidIdentifierLengthError(SearchValidationError):
    """Raised when a correlation identifier has the wrong length."""

    violation = Violation.INVALID_LENGTH

    def __init__(self, field: str, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            field, f"{field} must be {expected} characters long (got {actual})"
        )


class InvalidDateTimeError(SearchValidationError):
    """Raised when a date-time field cannot be interpreted."""

    violation = Violation.INVALID_DATE_TIME

    def __init__(self, field: str, value: object) -> None:
        self.value = value
        super().__init__(field, f"{field} is not a valid date-time: {value!r}")


class ConfigurationError(HIClientError):
    """Raised when configuration is invalid or missing."""


class ServiceError(HIClientError):
    """Base for errors reported by, or while reaching, the HI service."""


class ServiceFaultError(ServiceError):
    """Raised when the HI service answers with a SOAP fault.

    Parameters
    ----------
    message : str
        Fault string.
    code : str | None
        Fault code.
    service_messages : list
        ``ServiceMessage`` entries parsed from the fault detail.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        service_messages: list | None = None,
    ) -> None:
        self.code = code
        self.service_messages = list(service_messages or [])
        super().__init__(message)


class ServiceTransportError(ServiceError):
    """Raised when the HTTP exchange with the HI service fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class UnexpectedServiceResponseError(ServiceError):
    """Raised when the service returns an empty or malformed response."""
