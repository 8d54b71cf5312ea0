# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
wirechain package entrypoint.

An immutable, fluent HTTP request builder. Requests are plain values; the
network exchange happens in a chain of wires, each decorator wrapping the
previous one (basic auth, retries, redirects, logging), with an httpx
transport at the centre.
"""

from .config import HttpSettings, load_http_settings
from .errors import (
    ConfigurationError,
    ErrorCategory,
    ResponseAssertionError,
    TransportError,
    WirechainError,
)
from .http import (
    Headers,
    MultipartBody,
    Request,
    RequestBody,
    RequestURI,
    Response,
    RestResponse,
)
from .log import setup_logging
from .version import __version__
from .wire import (
    AutoRedirectingWire,
    BasicAuthWire,
    HttpxWire,
    RetryConfig,
    RetryWire,
    StubWire,
    UserAgentWire,
    VerboseWire,
    Wire,
    create_default_wire,
)

__all__ = [
    "AutoRedirectingWire",
    "BasicAuthWire",
    "ConfigurationError",
    "ErrorCategory",
    "Headers",
    "HttpSettings",
    "HttpxWire",
    "MultipartBody",
    "Request",
    "RequestBody",
    "RequestURI",
    "Response",
    "ResponseAssertionError",
    "RestResponse",
    "RetryConfig",
    "RetryWire",
    "StubWire",
    "TransportError",
    "UserAgentWire",
    "VerboseWire",
    "Wire",
    "WirechainError",
    "create_default_wire",
    "load_http_settings",
    "setup_logging",
    "__version__",
]
