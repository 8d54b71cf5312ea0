# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Deterministic, programmable wire for tests."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace

from ..errors import TransportError
from ..http.headers import Headers
from ..http.response import Response
from .base import Wire


@dataclass(frozen=True)
class RecordedRequest:
    method: str
    uri: str
    headers: Headers
    body: bytes
    timeout: float | None = None

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


Answer = Response | TransportError | Callable[[RecordedRequest], Response]


class StubWire(Wire):
    """
    Innermost wire that records every request and replays queued answers.

    An answer is a Response, a TransportError to raise, or a callable taking
    the recorded request. Once the queue is drained the last answer repeats;
    with nothing queued at all the wire answers ``200`` with an empty body.
    """

    def __init__(self, answers: Iterable[Answer] = ()):
        self._answers: deque[Answer] = deque(answers)
        self._last: Answer | None = None
        self.requests: list[RecordedRequest] = []

    def next(self, answer: Answer) -> StubWire:
        self._answers.append(answer)
        return self

    def take(self, index: int = 0) -> RecordedRequest:
        return self.requests[index]

    @property
    def calls(self) -> int:
        return len(self.requests)

    def send(
        self,
        method: str,
        uri: str,
        headers: Headers,
        body: bytes,
        *,
        timeout: float | None = None,
    ) -> Response:
        recorded = RecordedRequest(method=method, uri=uri, headers=headers, body=body, timeout=timeout)
        self.requests.append(recorded)
        if self._answers:
            self._last = self._answers.popleft()
        answer = self._last if self._last is not None else Response(status=200)
        if isinstance(answer, TransportError):
            raise answer
        if isinstance(answer, Response):
            return answer if answer.uri else replace(answer, uri=uri)
        return answer(recorded)


def echo_headers(request: RecordedRequest) -> Response:
    """Answer with the received request headers as the response headers."""
    return Response(status=200, headers=request.headers, body=request.body, uri=request.uri)


__all__ = ["RecordedRequest", "StubWire", "echo_headers"]
