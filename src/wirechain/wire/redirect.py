# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Redirect-following wire."""

from __future__ import annotations

import logging

from ..config import load_http_settings
from ..http.headers import Headers
from ..http.response import Response
from ..http.uri import resolve, same_origin
from .base import Wire

logger = logging.getLogger(__name__)

REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})


class AutoRedirectingWire(Wire):
    """
    Follow ``Location`` on 3xx responses, at most ``max_hops`` times.

    303 switches the method to GET and drops the body; other redirect codes
    keep both. ``Authorization`` is not carried to a different origin. When
    the hop budget is spent the last 3xx response is returned as is.
    """

    def __init__(self, origin: Wire, max_hops: int | None = None):
        self.origin = origin
        self.max_hops = load_http_settings().max_redirects if max_hops is None else max(0, max_hops)

    def send(
        self,
        method: str,
        uri: str,
        headers: Headers,
        body: bytes,
        *,
        timeout: float | None = None,
    ) -> Response:
        hops = 0
        while True:
            response = self.origin.send(method, uri, headers, body, timeout=timeout)
            location = response.headers.get("Location")
            if response.status not in REDIRECT_STATUSES or not location:
                return response
            if hops >= self.max_hops:
                logger.warning("Giving up on %s after %d redirects", uri, hops)
                return response
            hops += 1
            target = resolve(uri, location)
            if response.status == 303:
                method, body = "GET", b""
                headers = headers.without("Content-Type").without("Content-Length")
            if not same_origin(uri, target):
                headers = headers.without("Authorization")
            logger.debug("Redirect %d: %s -> %s (%d)", hops, uri, target, response.status)
            uri = target


__all__ = ["AutoRedirectingWire", "REDIRECT_STATUSES"]
