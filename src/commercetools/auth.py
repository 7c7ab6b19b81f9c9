"""Bearer token providers.

The client asks its provider for a token once per request through
``get_valid_token()``. `ClientCredentialsTokenProvider` implements the OAuth2
client credentials grant against the commercetools auth service and caches
the token until shortly before it expires.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Sequence

import requests

from .errors import AuthError, TimeoutError, TransportError

logger = logging.getLogger(__name__)


class TokenProvider(Protocol):
    def get_valid_token(self) -> str: ...


@dataclass(frozen=True)
class Token:
    access_token: str
    token_type: str = "Bearer"
    expires_at: Optional[float] = None
    scope: str = ""

    def expired(self, now: float, leeway: float = 0.0) -> bool:
        if self.expires_at is None:
            return False
        return now >= self.expires_at - leeway


class StaticTokenProvider:
    """Always hands out the same token (tests, pre-issued tokens)."""

    def __init__(self, token: str) -> None:
        self._token = token

    def get_valid_token(self) -> str:
        return self._token


class ClientCredentialsTokenProvider:
    def __init__(
        self,
        auth_url: str,
        client_id: str,
        client_secret: str,
        scopes: Sequence[str] | None = None,
        *,
        session: requests.Session | None = None,
        timeout: float = 30.0,
        leeway: float = 30.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.token_url = auth_url.rstrip("/") + "/oauth/token"
        self._client_id = client_id
        self._client_secret = client_secret
        self.scopes = list(scopes or [])
        self._session = session or requests.Session()
        self._timeout = timeout
        self._leeway = leeway
        self._clock = clock
        self._token: Token | None = None
        self._lock = threading.Lock()

    def get_valid_token(self) -> str:
        with self._lock:
            if self._token is None or self._token.expired(self._clock(), self._leeway):
                self._token = self._fetch_token()
            return self._token.access_token

    def _fetch_token(self) -> Token:
        data = {"grant_type": "client_credentials"}
        if self.scopes:
            data["scope"] = " ".join(self.scopes)
        logger.debug("requesting access token from %s", self.token_url)
        try:
            resp = self._session.post(
                self.token_url,
                data=data,
                auth=(self._client_id, self._client_secret),
                timeout=self._timeout,
            )
        except requests.Timeout as e:
            raise TimeoutError("token request timed out") from e
        except requests.RequestException as e:
            raise TransportError(str(e)) from e

        try:
            payload = resp.json()
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {}

        if resp.status_code != 200:
            error = payload.get("error") or f"http_{resp.status_code}"
            description = payload.get("error_description") or payload.get("message") or resp.text
            raise AuthError(str(description), code=str(error), details=payload)

        access_token = payload.get("access_token")
        if not access_token:
            raise AuthError("token response did not contain an access_token", details=payload)

        expires_in = payload.get("expires_in")
        expires_at = self._clock() + float(expires_in) if expires_in is not None else None
        logger.debug("obtained access token (expires_in=%s)", expires_in)
        return Token(
            access_token=access_token,
            token_type=payload.get("token_type", "Bearer"),
            expires_at=expires_at,
            scope=payload.get("scope", ""),
        )
