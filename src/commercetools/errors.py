"""Error taxonomy for the commercetools SDK.

Two families live here:

- exceptions raised by the client (`SDKError` and subclasses), and
- the code-tagged sub-errors (`ApiError` variants) found in the ``errors``
  list of an API error envelope.

`ErrorResponse` ties them together: it is raised for any well-formed API
error and owns the decoded sub-errors.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Type


class SDKError(Exception):
    """Base error for SDK exceptions (transport/runtime)."""

    def __init__(self, message: str = "", code: str | None = None, details: dict | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class TransportError(SDKError):
    """Network/connection failure."""

    pass


class TimeoutError(TransportError):
    """Deadline exceeded."""

    pass


class AuthError(SDKError):
    """Token could not be obtained for the request."""

    pass


class DecodeError(SDKError):
    """Response body could not be decoded."""

    pass


class ConfigurationError(SDKError):
    """Missing or invalid client settings."""

    pass


@dataclass(frozen=True)
class ApiError:
    """A single code-tagged entry of an error envelope."""

    code: str
    message: str = ""
    extra: Dict[str, Any] = field(default_factory=dict, compare=False)

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ApiError":
        extra = {k: v for k, v in data.items() if k not in ("code", "message")}
        kwargs = {name: extra.get(key) for name, key in cls._fields().items()}
        return cls(code=str(data.get("code") or ""), message=str(data.get("message") or ""), extra=extra, **kwargs)

    @classmethod
    def _fields(cls) -> Dict[str, str]:
        # python attribute -> wire key
        return {}


@dataclass(frozen=True)
class GenericError(ApiError):
    """Fallback for codes without a dedicated variant."""


@dataclass(frozen=True)
class InsufficientScopeError(ApiError):
    pass


@dataclass(frozen=True)
class InvalidTokenError(ApiError):
    pass


@dataclass(frozen=True)
class InvalidClientError(ApiError):
    pass


@dataclass(frozen=True)
class InvalidScopeError(ApiError):
    pass


@dataclass(frozen=True)
class AccessDeniedError(ApiError):
    pass


@dataclass(frozen=True)
class InvalidJSONInputError(ApiError):
    detailed_error_message: Optional[str] = None

    @classmethod
    def _fields(cls) -> Dict[str, str]:
        return {"detailed_error_message": "detailedErrorMessage"}


@dataclass(frozen=True)
class InvalidInputError(ApiError):
    pass


@dataclass(frozen=True)
class InvalidOperationError(ApiError):
    pass


@dataclass(frozen=True)
class InvalidFieldError(ApiError):
    field: Optional[str] = None
    invalid_value: Any = dataclasses.field(default=None, compare=False)
    allowed_values: Optional[List[Any]] = dataclasses.field(default=None, compare=False)

    @classmethod
    def _fields(cls) -> Dict[str, str]:
        return {"field": "field", "invalid_value": "invalidValue", "allowed_values": "allowedValues"}


@dataclass(frozen=True)
class RequiredFieldError(ApiError):
    field: Optional[str] = None

    @classmethod
    def _fields(cls) -> Dict[str, str]:
        return {"field": "field"}


@dataclass(frozen=True)
class DuplicateFieldError(ApiError):
    field: Optional[str] = None
    duplicate_value: Any = dataclasses.field(default=None, compare=False)

    @classmethod
    def _fields(cls) -> Dict[str, str]:
        return {"field": "field", "duplicate_value": "duplicateValue"}


@dataclass(frozen=True)
class ResourceNotFoundError(ApiError):
    pass


@dataclass(frozen=True)
class ConcurrentModificationError(ApiError):
    current_version: Optional[int] = None

    @classmethod
    def _fields(cls) -> Dict[str, str]:
        return {"current_version": "currentVersion"}


@dataclass(frozen=True)
class ReferenceExistsError(ApiError):
    referenced_by: Optional[str] = None

    @classmethod
    def _fields(cls) -> Dict[str, str]:
        return {"referenced_by": "referencedBy"}


@dataclass(frozen=True)
class QueryTimedOutError(ApiError):
    pass


@dataclass(frozen=True)
class QueryComplexityLimitExceededError(ApiError):
    pass


@dataclass(frozen=True)
class InvalidCredentialsError(ApiError):
    pass


@dataclass(frozen=True)
class OverCapacityError(ApiError):
    pass


@dataclass(frozen=True)
class GeneralError(ApiError):
    pass


ERROR_VARIANTS: Dict[str, Type[ApiError]] = {
    "insufficient_scope": InsufficientScopeError,
    "invalid_token": InvalidTokenError,
    "invalid_client": InvalidClientError,
    "invalid_scope": InvalidScopeError,
    "access_denied": AccessDeniedError,
    "InvalidJsonInput": InvalidJSONInputError,
    "InvalidInput": InvalidInputError,
    "InvalidOperation": InvalidOperationError,
    "InvalidField": InvalidFieldError,
    "RequiredField": RequiredFieldError,
    "DuplicateField": DuplicateFieldError,
    "ResourceNotFound": ResourceNotFoundError,
    "ConcurrentModification": ConcurrentModificationError,
    "ReferenceExists": ReferenceExistsError,
    "QueryTimedOut": QueryTimedOutError,
    "QueryComplexityLimitExceeded": QueryComplexityLimitExceededError,
    "InvalidCredentials": InvalidCredentialsError,
    "OverCapacity": OverCapacityError,
    "General": GeneralError,
}


def api_error_from_dict(data: Dict[str, Any]) -> ApiError:
    """Build the variant registered for ``data["code"]``, or `GenericError`."""
    variant = ERROR_VARIANTS.get(str(data.get("code") or ""), GenericError)
    return variant.from_dict(data)


class ErrorResponse(SDKError):
    """Well-formed API error; ``str()`` is the top-level message."""

    def __init__(
        self,
        status_code: int,
        message: str,
        errors: List[ApiError] | None = None,
        raw: dict | None = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.errors = list(errors or [])
        self.raw = raw or {}
        first_code = self.errors[0].code if self.errors else None
        super().__init__(message, code=first_code, details=self.raw)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"ErrorResponse(status_code={self.status_code!r}, message={self.message!r}, errors={self.errors!r})"
