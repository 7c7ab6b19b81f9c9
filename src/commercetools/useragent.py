"""User-Agent header composition.

Format::

    commercetools-python-sdk/<version> Python/<py-version> (<os>; <arch>) [<lib>[/<lib-version>] ][(+<url>; +<email>)]
"""

from __future__ import annotations

import platform
import sys

from . import __version__
from .config import Config

SDK_NAME = "commercetools-python-sdk"
SDK_VERSION = __version__

PLATFORM_NAME = "Python"
PLATFORM_VERSION = platform.python_version()
PLATFORM_OS = sys.platform
PLATFORM_ARCH = platform.machine()


def build_user_agent(config: Config) -> str:
    parts = [
        f"{SDK_NAME}/{SDK_VERSION}",
        f"{PLATFORM_NAME}/{PLATFORM_VERSION}",
        f"({PLATFORM_OS}; {PLATFORM_ARCH})",
    ]

    if config.library_name:
        library = config.library_name
        if config.library_version:
            library += f"/{config.library_version}"
        parts.append(library)

    contact = [f"+{value}" for value in (config.contact_url, config.contact_email) if value]
    if contact:
        parts.append(f"({'; '.join(contact)})")

    return " ".join(parts)
