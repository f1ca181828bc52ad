"""Error hierarchy for the client.

Every failure raised by the library derives from `ApiSportsError` and carries
a `code` and an `ErrorCategory`, so callers can branch on the kind of failure
without matching on class names:

- VALIDATION: a parameter object broke one or more field constraints.
- TRANSPORT: the HTTP exchange itself failed (network, missing credential).
- API: the remote service reported a business-level failure.
- UNKNOWN_STATUS: the HTTP status is outside the handled bands.
- DECODING: the envelope or the resource payload had an unexpected shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """High-level error categories."""

    VALIDATION = "validation"
    TRANSPORT = "transport"
    API = "api"
    UNKNOWN_STATUS = "unknown_status"
    DECODING = "decoding"


class ApiSportsError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, code: str, category: ErrorCategory) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category


@dataclass(frozen=True)
class FieldViolation:
    """One broken constraint on one parameter field."""

    field: str
    constraint: str
    value: Any

    def __str__(self) -> str:
        return f"{self.field} ({self.value!r}) must be {self.constraint}"


class FieldValidationError(ApiSportsError):
    """Raised before any network activity when parameters are invalid."""

    def __init__(self, violations: list[FieldViolation]) -> None:
        details = "; ".join(str(v) for v in violations)
        super().__init__(
            f"error while validating field : {details}",
            "FIELD_VALIDATION_ERROR",
            ErrorCategory.VALIDATION,
        )
        self.violations = list(violations)

    @property
    def fields(self) -> list[str]:
        return [v.field for v in self.violations]


class TransportError(ApiSportsError):
    """The request could not be sent or its body could not be read."""

    def __init__(self, message: str, code: str = "TRANSPORT_ERROR") -> None:
        super().__init__(message, code, ErrorCategory.TRANSPORT)


class APIKeyMissingError(TransportError):
    """No credential was found for the active subscription."""

    def __init__(self, env_var: str) -> None:
        super().__init__(
            f"API Key must be non empty (set the {env_var} environment variable)",
            "API_KEY_MISSING",
        )
        self.env_var = env_var


class APIResponseError(ApiSportsError):
    """The API answered with an error, either by status or inside the envelope."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(
            f"Error(s) from API : {message}",
            "API_RESPONSE_ERROR",
            ErrorCategory.API,
        )
        self.api_message = message
        self.status_code = status_code


class UnknownHTTPCodeError(ApiSportsError):
    """The HTTP status is neither a success nor a recognized API error."""

    def __init__(self, status_code: int) -> None:
        super().__init__(
            f"unknown http code : {status_code}",
            "UNKNOWN_HTTP_CODE",
            ErrorCategory.UNKNOWN_STATUS,
        )
        self.status_code = status_code


class DecodingError(ApiSportsError):
    """The JSON body did not match the expected shape.

    The original exception is chained as `__cause__` by the raiser.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, "DECODING_ERROR", ErrorCategory.DECODING)
