"""
commercetools – Python SDK core

Public surface:
- Client: Client, PagedQueryResponse
- Query parameters: QueryInput, encode_query, urlencode_query
- User agent: build_user_agent
- Auth: ClientCredentialsTokenProvider, StaticTokenProvider
- Transports: RequestsTransport, HttpxTransport
- Config: Config, configure, config (context manager), settings
- Errors: SDKError and subclasses, ErrorResponse and the ApiError variants

Resource-specific endpoints are not wrapped; use the generic helpers on
`Client` with the resource path.
"""

__version__ = "1.0.0"

from .config import Config, configure, config, settings
from .query import QueryInput, encode_query, urlencode_query
from .useragent import build_user_agent
from .auth import ClientCredentialsTokenProvider, StaticTokenProvider, TokenProvider
from .transport import HttpxTransport, Request, RequestsTransport, Response, Transport
from .client import Client, PagedQueryResponse
from .errors import (
    SDKError,
    TransportError,
    TimeoutError,
    AuthError,
    DecodeError,
    ConfigurationError,
    ErrorResponse,
    ApiError,
    GenericError,
    InsufficientScopeError,
    InvalidTokenError,
    InvalidJSONInputError,
    InvalidInputError,
    InvalidOperationError,
    InvalidFieldError,
    RequiredFieldError,
    DuplicateFieldError,
    ResourceNotFoundError,
    ConcurrentModificationError,
    ReferenceExistsError,
)

__all__ = [
    # Config
    "Config",
    "configure",
    "config",
    "settings",
    # Client
    "Client",
    "PagedQueryResponse",
    "QueryInput",
    "encode_query",
    "urlencode_query",
    "build_user_agent",
    # Collaborators
    "TokenProvider",
    "ClientCredentialsTokenProvider",
    "StaticTokenProvider",
    "Transport",
    "Request",
    "Response",
    "RequestsTransport",
    "HttpxTransport",
    # Errors
    "SDKError",
    "TransportError",
    "TimeoutError",
    "AuthError",
    "DecodeError",
    "ConfigurationError",
    "ErrorResponse",
    "ApiError",
    "GenericError",
    "InsufficientScopeError",
    "InvalidTokenError",
    "InvalidJSONInputError",
    "InvalidInputError",
    "InvalidOperationError",
    "InvalidFieldError",
    "RequiredFieldError",
    "DuplicateFieldError",
    "ResourceNotFoundError",
    "ConcurrentModificationError",
    "ReferenceExistsError",
    "__version__",
]
