"""HTTP client for the commercetools platform API.

`Client.execute` is the single request path: it builds the URL from the
configured API URL, project key and `QueryInput`, attaches the bearer token
and User-Agent, hands the request to the transport and routes the response
through `commercetools.decoder`.

The resource helpers (`get`, `query`, `create`, `update`, `delete`) are thin
wrappers following the platform's conventions for every resource type:
updates are ``{"version", "actions"}`` posted to the resource URL and deletes
carry the expected ``version`` as a query parameter.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence
from urllib.parse import urlencode

from .auth import ClientCredentialsTokenProvider, TokenProvider
from .config import Config, settings
from .decoder import decode_response, shape
from .errors import AuthError, ConfigurationError
from .query import QueryInput, encode_query
from .transport import Request, RequestsTransport, Transport
from .useragent import build_user_agent

logger = logging.getLogger(__name__)


@dataclass
class PagedQueryResponse:
    limit: int = 0
    offset: int = 0
    count: int = 0
    total: Optional[int] = None
    results: List[Any] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PagedQueryResponse":
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object for a paged query response, got {type(data).__name__}")
        return cls(
            limit=int(data.get("limit", 0)),
            offset=int(data.get("offset", 0)),
            count=int(data.get("count", 0)),
            total=data.get("total"),
            results=list(data.get("results") or []),
        )


def _jsonable(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    return obj


def _default_token_provider(config: Config) -> TokenProvider:
    if not config.client_id or not config.client_secret:
        raise ConfigurationError(
            "client_id and client_secret are required when no token_provider is given "
            "(set CTP_CLIENT_ID / CTP_CLIENT_SECRET or pass them explicitly)"
        )
    return ClientCredentialsTokenProvider(
        config.auth_url,
        config.client_id,
        config.client_secret,
        scopes=config.scopes,
        timeout=config.timeout,
    )


class Client:
    def __init__(
        self,
        config: Config | None = None,
        *,
        token_provider: TokenProvider | None = None,
        transport: Transport | None = None,
        **overrides: Any,
    ) -> None:
        if config is None:
            s = settings()
            for k, v in overrides.items():
                if not hasattr(s, k):
                    raise AttributeError(f"Unknown setting: {k}")
                setattr(s, k, v)
            config = s.to_config()
        elif overrides:
            names = {f.name for f in dataclasses.fields(config)}
            for k in overrides:
                if k not in names:
                    raise AttributeError(f"Unknown setting: {k}")
            config = dataclasses.replace(config, **overrides)
        self.config = config
        self.token_provider = token_provider or _default_token_provider(config)
        self.transport = transport or RequestsTransport(timeout=config.timeout)
        self.user_agent = build_user_agent(config)

    def _build_request(self, method: str, path: str, query: QueryInput | Sequence | None, body: Any) -> Request:
        url = self.config.base_url + "/" + path.lstrip("/")
        params = encode_query(query) if query is None or isinstance(query, QueryInput) else list(query)
        if params:
            url = f"{url}?{urlencode(params)}"

        try:
            token = self.token_provider.get_valid_token()
        except AuthError:
            raise
        except Exception as e:
            raise AuthError(f"could not obtain access token: {e}") from e

        headers = {
            "Authorization": f"Bearer {token}",
            "User-Agent": self.user_agent,
            "Accept": "application/json",
        }
        content = None
        if body is not None:
            headers["Content-Type"] = "application/json"
            content = json.dumps(_jsonable(body)).encode("utf-8")
        return Request(method=method.upper(), url=url, headers=headers, content=content)

    def execute(
        self,
        method: str,
        path: str,
        query: QueryInput | Sequence | None = None,
        body: Any = None,
        output: Optional[Callable[..., Any]] = None,
    ) -> Any:
        """Send one request and return the decoded body.

        ``query`` is a `QueryInput` or a sequence of ``(key, value)`` pairs.
        Raises `ErrorResponse` for API errors, `DecodeError`, `AuthError` or
        `TransportError` otherwise.
        """
        request = self._build_request(method, path, query, body)
        logger.debug("%s %s", request.method, request.url)
        response = self.transport.do(request)
        logger.debug("%s %s -> %s", request.method, request.url, response.status_code)
        return decode_response(response, output)

    def get(self, path: str, output: Optional[Callable[..., Any]] = None, expand: str | None = None) -> Any:
        return self.execute("GET", path, QueryInput(expand=expand), output=output)

    def query(
        self,
        path: str,
        query: QueryInput | None = None,
        output: Optional[Callable[..., Any]] = None,
    ) -> PagedQueryResponse:
        page = self.execute("GET", path, query, output=PagedQueryResponse)
        if page is None:
            return PagedQueryResponse()
        if output is not None:
            page.results = [shape(output, item) for item in page.results]
        return page

    def create(self, path: str, draft: Any, output: Optional[Callable[..., Any]] = None) -> Any:
        return self.execute("POST", path, body=draft, output=output)

    def update(
        self,
        path: str,
        version: int,
        actions: Sequence[Any],
        output: Optional[Callable[..., Any]] = None,
    ) -> Any:
        body = {"version": version, "actions": [_jsonable(a) for a in actions]}
        return self.execute("POST", path, body=body, output=output)

    def delete(self, path: str, version: int, output: Optional[Callable[..., Any]] = None) -> Any:
        return self.execute("DELETE", path, [("version", str(version))], output=output)

    def close(self) -> None:
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
