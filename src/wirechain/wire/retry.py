# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Retry-on-failure wire."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field, replace

from ..config import HttpSettings, load_http_settings
from ..errors import TransportError
from ..http.headers import Headers
from ..http.response import Response
from .base import Wire

logger = logging.getLogger(__name__)

SERVER_ERRORS = frozenset(range(500, 600))


@dataclass
class RetryConfig:
    """Retry policy; statuses listed in ``retry_statuses`` count as failures."""

    max_attempts: int = 3
    backoff_factor: float = 2.0
    initial_delay: float = 0.5
    retry_statuses: frozenset[int] = field(default_factory=lambda: SERVER_ERRORS)
    retry_transport_errors: bool = True

    @classmethod
    def from_settings(cls, settings: HttpSettings) -> RetryConfig:
        """Build a retry config from the shared HttpSettings."""
        return cls(
            max_attempts=max(1, settings.max_retries),
            backoff_factor=settings.backoff_factor,
            initial_delay=settings.initial_delay,
        )


class RetryWire(Wire):
    """
    Re-send the same request verbatim until it succeeds or attempts run out.

    Exhaustion surfaces the last failure: the last transport error is raised,
    or the last response with a retryable status is returned.
    """

    def __init__(self, origin: Wire, config: RetryConfig | None = None, **overrides: object):
        self.origin = origin
        base = config or RetryConfig.from_settings(load_http_settings())
        base = replace(base, **overrides) if overrides else base
        self.config = replace(base, max_attempts=max(1, base.max_attempts))

    def send(
        self,
        method: str,
        uri: str,
        headers: Headers,
        body: bytes,
        *,
        timeout: float | None = None,
    ) -> Response:
        cfg = self.config
        delay = cfg.initial_delay
        attempt = 0
        while True:
            attempt += 1
            try:
                response = self.origin.send(method, uri, headers, body, timeout=timeout)
            except TransportError as exc:
                if not cfg.retry_transport_errors or attempt >= cfg.max_attempts:
                    raise
                logger.warning(
                    "%s %s failed on attempt %d/%d (%s): %s",
                    method,
                    uri,
                    attempt,
                    cfg.max_attempts,
                    exc.reason,
                    exc,
                )
            else:
                if response.status not in cfg.retry_statuses or attempt >= cfg.max_attempts:
                    return response
                logger.warning(
                    "%s %s returned %d on attempt %d/%d",
                    method,
                    uri,
                    response.status,
                    attempt,
                    cfg.max_attempts,
                )
            if delay > 0:
                time.sleep(delay)
            delay *= cfg.backoff_factor


__all__ = ["RetryConfig", "RetryWire", "SERVER_ERRORS"]
