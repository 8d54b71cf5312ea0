# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Wire abstraction and factory."""

from __future__ import annotations

from typing import Protocol

from ..config import HttpSettings, load_http_settings
from ..http.headers import Headers
from ..http.response import Response


class Wire(Protocol):
    """
    Transport capability: turn one fully specified request into a response.

    Decorators implement the same protocol and hold exactly one inner wire,
    conventionally named ``origin``.
    """

    def send(
        self,
        method: str,
        uri: str,
        headers: Headers,
        body: bytes,
        *,
        timeout: float | None = None,
    ) -> Response: ...


def create_default_wire(settings: HttpSettings | None = None) -> Wire:
    """Factory for the default httpx-backed wire."""
    from .httpx_wire import HttpxWire

    return HttpxWire(settings or load_http_settings())


__all__ = ["Wire", "create_default_wire"]
