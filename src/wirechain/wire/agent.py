# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Wire adding a default User-Agent header."""

from __future__ import annotations

from ..config import load_http_settings
from ..http.headers import Headers
from ..http.response import Response
from .base import Wire


class UserAgentWire(Wire):
    """Set ``User-Agent`` when the request carries none; an explicit one wins."""

    def __init__(self, origin: Wire, agent: str | None = None):
        self.origin = origin
        self.agent = agent or load_http_settings().user_agent

    def send(
        self,
        method: str,
        uri: str,
        headers: Headers,
        body: bytes,
        *,
        timeout: float | None = None,
    ) -> Response:
        if "User-Agent" not in headers:
            headers = headers.with_value("User-Agent", self.agent)
        return self.origin.send(method, uri, headers, body, timeout=timeout)


__all__ = ["UserAgentWire"]
