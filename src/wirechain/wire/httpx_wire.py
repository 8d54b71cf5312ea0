# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed transport wire."""

from __future__ import annotations

import logging

import httpx

from ..config import HttpSettings, load_http_settings
from ..errors import TransportError, categorize_exception
from ..http.headers import Headers
from ..http.response import Response
from .base import Wire

logger = logging.getLogger(__name__)


class HttpxWire(Wire):
    """
    Innermost wire: performs the actual exchange with a synchronous httpx client.

    Redirects are never followed here; layer ``AutoRedirectingWire`` for that.
    Every ``httpx.HTTPError`` surfaces as ``TransportError``.
    """

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            follow_redirects=False,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    def send(
        self,
        method: str,
        uri: str,
        headers: Headers,
        body: bytes,
        *,
        timeout: float | None = None,
    ) -> Response:
        max_body_bytes = self.settings.max_body_bytes
        if max_body_bytes <= 0:
            max_body_bytes = 16 * 1024 * 1024
        if timeout is None:
            timeout = self.settings.timeout

        try:
            with self._client.stream(
                method,
                uri,
                headers=headers.items(),
                content=body or None,
                timeout=timeout,
                follow_redirects=False,
            ) as resp:
                content = bytearray()
                for chunk in resp.iter_bytes():
                    if not chunk:
                        continue
                    remaining = max_body_bytes - len(content)
                    if len(chunk) > remaining:
                        content.extend(chunk[:remaining])
                        logger.warning("Body of %s %s truncated at %d bytes", method, uri, max_body_bytes)
                        break
                    content.extend(chunk)
        except httpx.HTTPError as exc:
            raise TransportError(
                f"{method} {uri} failed: {exc}",
                category=categorize_exception(exc),
                uri=uri,
            ) from exc

        return Response(
            status=resp.status_code,
            headers=Headers(resp.headers),
            body=bytes(content),
            reason=resp.reason_phrase,
            uri=str(resp.url),
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpxWire:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["HttpxWire"]
