"""Transports perform the network I/O for `commercetools.client.Client`.

A transport is anything with ``do(request) -> Response``. Two are bundled:

- `RequestsTransport` (default): a pooled ``requests.Session``
- `HttpxTransport`: a pooled ``httpx.Client``

Both translate their library's exceptions into `TransportError` /
`TimeoutError` and never retry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Protocol

import httpx
import requests

from .errors import TimeoutError, TransportError


@dataclass(frozen=True)
class Request:
    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    content: Optional[bytes] = None


@dataclass(frozen=True)
class Response:
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    content: bytes = b""
    reason: str = ""


class Transport(Protocol):
    def do(self, request: Request) -> Response: ...


class RequestsTransport:
    def __init__(self, session: requests.Session | None = None, timeout: float = 60.0) -> None:
        self._session = session or requests.Session()
        self._owns_session = session is None
        self.timeout = timeout

    def do(self, request: Request) -> Response:
        try:
            resp = self._session.request(
                request.method,
                request.url,
                headers=dict(request.headers),
                data=request.content,
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            raise TimeoutError("request timed out") from e
        except requests.RequestException as e:
            raise TransportError(str(e)) from e
        return Response(
            status_code=resp.status_code,
            headers=dict(resp.headers),
            content=resp.content or b"",
            reason=resp.reason or "",
        )

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "RequestsTransport":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class HttpxTransport:
    def __init__(self, client: httpx.Client | None = None, timeout: float = 60.0) -> None:
        self._client = client or httpx.Client(timeout=timeout)
        self._owns_client = client is None
        self.timeout = timeout

    def do(self, request: Request) -> Response:
        try:
            resp = self._client.request(
                request.method,
                request.url,
                headers=dict(request.headers),
                content=request.content,
            )
        except httpx.TimeoutException as e:
            raise TimeoutError("request timed out") from e
        except httpx.HTTPError as e:
            raise TransportError(str(e)) from e
        headers: Dict[str, str] = dict(resp.headers)
        return Response(
            status_code=resp.status_code,
            headers=headers,
            content=resp.content,
            reason=resp.reason_phrase,
        )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
