from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, asdict, field
from typing import Any, List, Optional
import os

DEFAULT_API_URL = "https://api.europe-west1.gcp.commercetools.com"
DEFAULT_AUTH_URL = "https://auth.europe-west1.gcp.commercetools.com"


@dataclass(frozen=True)
class Config:
    """Immutable client configuration.

    The identity fields (`library_name`, `library_version`, `contact_url`,
    `contact_email`) only feed the User-Agent header.
    """

    api_url: str = DEFAULT_API_URL
    auth_url: str = DEFAULT_AUTH_URL
    project_key: str = ""
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    scopes: tuple = ()

    library_name: str = ""
    library_version: str = ""
    contact_url: str = ""
    contact_email: str = ""

    timeout: float = 60.0

    @property
    def base_url(self) -> str:
        url = self.api_url.rstrip("/")
        if self.project_key:
            url = f"{url}/{self.project_key}"
        return url


@dataclass
class Settings:
    """SDK defaults with environment overlay."""

    api_url: str = DEFAULT_API_URL
    auth_url: str = DEFAULT_AUTH_URL
    project_key: str = ""
    client_id: str | None = None
    client_secret: str | None = None
    scopes: List[str] = field(default_factory=list)

    library_name: str = ""
    library_version: str = ""
    contact_url: str = ""
    contact_email: str = ""

    timeout: float = 60.0

    def to_config(self) -> Config:
        data = asdict(self)
        data["scopes"] = tuple(self.scopes)
        return Config(**data)


_global_settings = Settings()
_stack: list[Settings] = []


def _from_env(s: Settings) -> Settings:
    scopes = s.scopes
    env_scopes = os.getenv("CTP_SCOPES")
    if env_scopes:
        scopes = env_scopes.split()
    return Settings(
        api_url=os.getenv("CTP_API_URL", s.api_url),
        auth_url=os.getenv("CTP_AUTH_URL", s.auth_url),
        project_key=os.getenv("CTP_PROJECT_KEY", s.project_key),
        client_id=os.getenv("CTP_CLIENT_ID", s.client_id),
        client_secret=os.getenv("CTP_CLIENT_SECRET", s.client_secret),
        scopes=list(scopes),
        library_name=s.library_name,
        library_version=s.library_version,
        contact_url=s.contact_url,
        contact_email=s.contact_email,
        timeout=s.timeout,
    )


def configure(**kwargs: Any) -> None:
    """Configure global SDK defaults.

    Example:
        configure(project_key="my-shop", library_name="my-app", timeout=30)
    """
    global _global_settings
    for k, v in kwargs.items():
        if not hasattr(_global_settings, k):
            raise AttributeError(f"Unknown setting: {k}")
        setattr(_global_settings, k, v)


@contextmanager
def config(**kwargs: Any):
    """Temporarily apply settings within a context."""
    global _global_settings
    _stack.append(Settings(**asdict(_global_settings)))
    try:
        configure(**kwargs)
        yield
    finally:
        prev = _stack.pop()
        _global_settings = prev


def settings() -> Settings:
    """Return the effective merged settings (env overlaid on current)."""
    return _from_env(_global_settings)
