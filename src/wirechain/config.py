# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for wirechain."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"wirechain/{__version__}"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class HttpSettings:
    """Defaults shared by the httpx transport and the wire decorators."""

    timeout: float = 10.0
    max_retries: int = 3
    backoff_factor: float = 2.0
    initial_delay: float = 0.5
    max_redirects: int = 5
    user_agent: str = DEFAULT_USER_AGENT
    verify_ssl: bool = True
    max_body_bytes: int = 16 * 1024 * 1024

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_body_bytes = _int_env("WIRECHAIN_HTTP_MAX_BODY_BYTES", cls.max_body_bytes)
        if max_body_bytes <= 0:
            max_body_bytes = cls.max_body_bytes
        return cls(
            timeout=_float_env("WIRECHAIN_HTTP_TIMEOUT", cls.timeout),
            max_retries=_int_env("WIRECHAIN_HTTP_RETRIES", cls.max_retries),
            backoff_factor=_float_env("WIRECHAIN_HTTP_BACKOFF", cls.backoff_factor),
            initial_delay=_float_env("WIRECHAIN_HTTP_INITIAL_DELAY", cls.initial_delay),
            max_redirects=_int_env("WIRECHAIN_HTTP_MAX_REDIRECTS", cls.max_redirects),
            user_agent=os.getenv("WIRECHAIN_USER_AGENT", cls.user_agent),
            verify_ssl=_bool_env("WIRECHAIN_HTTP_VERIFY_SSL", cls.verify_ssl),
            max_body_bytes=max_body_bytes,
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()
