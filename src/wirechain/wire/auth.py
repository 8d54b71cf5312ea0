# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Basic authentication wire (RFC 7617)."""

from __future__ import annotations

import base64
import logging

from ..http.headers import Headers
from ..http.response import Response
from ..http.uri import UriParts, strip_user_info
from .base import Wire

logger = logging.getLogger(__name__)


def basic_auth_value(username: str, password: str) -> str:
    """Return ``Basic <base64(username:password)>`` using UTF-8 credentials."""
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


class BasicAuthWire(Wire):
    """
    Inject an ``Authorization: Basic`` header, then delegate.

    Credentials come from the constructor when given, otherwise from the
    percent-decoded user-info of the request URI. The user-info is removed
    from the URI handed to the inner wire. Requests without any credentials
    pass through untouched.
    """

    def __init__(self, origin: Wire, username: str | None = None, password: str | None = None):
        self.origin = origin
        self.username = username
        self.password = password

    def send(
        self,
        method: str,
        uri: str,
        headers: Headers,
        body: bytes,
        *,
        timeout: float | None = None,
    ) -> Response:
        credentials = self._credentials(uri)
        if credentials is not None:
            headers = headers.replaced("Authorization", basic_auth_value(*credentials))
            uri = strip_user_info(uri)
            logger.debug("Basic auth for %r added to %s %s", credentials[0], method, uri)
        return self.origin.send(method, uri, headers, body, timeout=timeout)

    def _credentials(self, uri: str) -> tuple[str, str] | None:
        if self.username is not None:
            return self.username, self.password or ""
        return UriParts.parse(uri).credentials()


__all__ = ["BasicAuthWire", "basic_auth_value"]
