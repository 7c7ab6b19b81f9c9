"""Turn HTTP responses into decoded values or typed errors.

Status handling:

- 2xx: JSON body decoded and shaped into the caller's output type
- 404 without a usable error envelope: fixed `ErrorResponse`
  ``"Not Found (404): ResourceNotFound"``
- anything else: the error envelope is parsed into an `ErrorResponse`
  whose sub-errors are dispatched on their ``code``
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, Callable, Optional

from .errors import (
    DecodeError,
    ErrorResponse,
    ResourceNotFoundError,
    api_error_from_dict,
)
from .transport import Response

NOT_FOUND_MESSAGE = "Not Found (404): ResourceNotFound"

_MISSING = object()


def _loads(content: bytes | str) -> Any:
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise DecodeError(str(e)) from e


def _is_empty(content: bytes | str | None) -> bool:
    return content is None or not content.strip()


def shape(output: Optional[Callable[..., Any]], data: Any) -> Any:
    """Build ``output`` from a decoded JSON value.

    ``output`` may be None (value returned as-is), a class exposing
    ``from_dict``, a dataclass type (unknown keys dropped) or any callable.
    """
    if output is None:
        return data
    try:
        from_dict = getattr(output, "from_dict", None)
        if from_dict is not None:
            return from_dict(data)
        if isinstance(output, type) and dataclasses.is_dataclass(output):
            if not isinstance(data, dict):
                raise TypeError(f"expected a JSON object for {output.__name__}, got {type(data).__name__}")
            names = {f.name for f in dataclasses.fields(output) if f.init}
            return output(**{k: v for k, v in data.items() if k in names})
        return output(data)
    except (TypeError, ValueError, KeyError, AttributeError) as e:
        raise DecodeError(str(e)) from e


def _not_found() -> ErrorResponse:
    return ErrorResponse(
        status_code=404,
        message=NOT_FOUND_MESSAGE,
        errors=[ResourceNotFoundError(code="ResourceNotFound", message=NOT_FOUND_MESSAGE)],
    )


def decode_error(status_code: int, content: bytes | str | None, reason: str = "") -> ErrorResponse:
    """Parse a non-2xx body into an `ErrorResponse`.

    Raises `DecodeError` when the envelope itself is malformed.
    """
    if status_code == 404:
        if _is_empty(content):
            return _not_found()
        try:
            envelope = json.loads(content)
        except json.JSONDecodeError:
            return _not_found()
        if not isinstance(envelope, dict) or not any(k in envelope for k in ("message", "errors", "error")):
            return _not_found()
    else:
        envelope = _loads(content if content is not None else b"")
        if not isinstance(envelope, dict):
            raise DecodeError(f"error response is not a JSON object: {type(envelope).__name__}")

    errors = [api_error_from_dict(item) for item in envelope.get("errors") or [] if isinstance(item, dict)]
    if not errors and envelope.get("error"):
        errors = [
            api_error_from_dict(
                {"code": envelope["error"], "message": envelope.get("error_description") or ""}
            )
        ]

    message = envelope.get("message") or envelope.get("error_description") or reason or f"HTTP {status_code}"
    raw_status = envelope.get("statusCode", _MISSING)
    try:
        resolved_status = int(raw_status) if raw_status is not _MISSING else status_code
    except (TypeError, ValueError):
        resolved_status = status_code
    return ErrorResponse(status_code=resolved_status, message=str(message), errors=errors, raw=envelope)


def decode_response(response: Response, output: Optional[Callable[..., Any]] = None) -> Any:
    """Return the shaped body of a 2xx response or raise its typed error."""
    if 200 <= response.status_code < 300:
        if _is_empty(response.content):
            return None
        return shape(output, _loads(response.content))
    raise decode_error(response.status_code, response.content, reason=response.reason)
