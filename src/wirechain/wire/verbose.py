# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Wire logging every request and response it relays."""

from __future__ import annotations

import logging

from ..http.headers import Headers
from ..http.response import Response
from .base import Wire

logger = logging.getLogger(__name__)

SNIPPET_BYTES = 1024
MASKED_HEADERS = frozenset({"authorization", "proxy-authorization"})


def _render(first_line: str, headers: Headers, body: bytes) -> str:
    lines = [first_line]
    for name, value in headers:
        if name.lower() in MASKED_HEADERS:
            scheme = value.split(" ", 1)[0] if " " in value else ""
            value = f"{scheme} ***".strip()
        lines.append(f"{name}: {value}")
    if body:
        snippet = body[:SNIPPET_BYTES].decode("utf-8", errors="replace")
        suffix = f"... ({len(body)} bytes)" if len(body) > SNIPPET_BYTES else ""
        lines.extend(["", snippet + suffix])
    return "\n".join(lines)


class VerboseWire(Wire):
    """Log the exchange, passing request and response through unchanged."""

    def __init__(self, origin: Wire, level: int = logging.INFO, log: logging.Logger | None = None):
        self.origin = origin
        self.level = level
        self.log = log or logger

    def send(
        self,
        method: str,
        uri: str,
        headers: Headers,
        body: bytes,
        *,
        timeout: float | None = None,
    ) -> Response:
        self.log.log(self.level, "%s", _render(f"{method} {uri}", headers, body))
        response = self.origin.send(method, uri, headers, body, timeout=timeout)
        self.log.log(
            self.level,
            "%s",
            _render(f"HTTP {response.status} {response.reason}", response.headers, response.body),
        )
        return response


__all__ = ["VerboseWire"]
