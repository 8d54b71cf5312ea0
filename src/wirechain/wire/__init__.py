# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Wire protocol, the httpx transport and the decorators layered over it."""

from .agent import UserAgentWire
from .auth import BasicAuthWire, basic_auth_value
from .base import Wire, create_default_wire
from .httpx_wire import HttpxWire
from .redirect import AutoRedirectingWire
from .retry import RetryConfig, RetryWire
from .stub import RecordedRequest, StubWire, echo_headers
from .verbose import VerboseWire

__all__ = [
    "AutoRedirectingWire",
    "BasicAuthWire",
    "HttpxWire",
    "RecordedRequest",
    "RetryConfig",
    "RetryWire",
    "StubWire",
    "UserAgentWire",
    "VerboseWire",
    "Wire",
    "basic_auth_value",
    "create_default_wire",
    "echo_headers",
]
