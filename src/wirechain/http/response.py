# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP response models returned by wires."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, fields, replace
from http import HTTPStatus
from typing import TYPE_CHECKING, TypeVar

from ..errors import ResponseAssertionError
from .headers import Headers
from .uri import resolve

if TYPE_CHECKING:
    from .request import Request

R = TypeVar("R", bound="Response")


def _default_reason(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return ""


@dataclass(frozen=True)
class Response:
    """Immutable result of one dispatch: status, headers and raw body."""

    status: int
    headers: Headers = field(default_factory=Headers)
    body: bytes = b""
    reason: str = ""
    uri: str | None = None
    request: Request | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.headers, Headers):
            object.__setattr__(self, "headers", Headers(self.headers))
        if isinstance(self.body, str):
            object.__setattr__(self, "body", self.body.encode("utf-8"))
        if not self.reason:
            object.__setattr__(self, "reason", _default_reason(self.status))

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def bound_to(self, request: Request) -> Response:
        """Attach the request that produced this response."""
        return replace(self, request=request, uri=self.uri or request.home)

    def back(self) -> Request:
        if self.request is None:
            raise RuntimeError("Response is not bound to a request")
        return self.request

    def view_as(self, capability: type[R]) -> R:
        """Reinterpret this response as a richer view without re-dispatching."""
        if isinstance(self, capability):
            return self
        return capability(**{item.name: getattr(self, item.name) for item in fields(Response)})


@dataclass(frozen=True)
class RestResponse(Response):
    """Response view with assertion helpers and navigation to related requests."""

    def assert_status(self, expected: int) -> RestResponse:
        if self.status != expected:
            raise ResponseAssertionError(
                f"HTTP status code is {self.status} {self.reason}, expected {expected}:\n{self.text}",
                self,
            )
        return self

    def assert_header(self, name: str, value: str) -> RestResponse:
        values = self.headers.get_all(name)
        if value not in values:
            raise ResponseAssertionError(f"Header {name!r} is {values!r}, expected it to contain {value!r}", self)
        return self

    def assert_body(self, expected: str | Callable[[str], bool]) -> RestResponse:
        """Check the body contains ``expected`` or satisfies it when it is a predicate."""
        text = self.text
        matched = expected(text) if callable(expected) else expected in text
        if not matched:
            raise ResponseAssertionError(f"Body does not match {expected!r}:\n{text}", self)
        return self

    def jump(self, uri: str) -> Request:
        """Request a URI relative to the one this response came from."""
        request = self.back()
        return request.with_uri(resolve(self.uri or request.home, uri))

    def follow(self) -> Request:
        location = self.headers.get("Location")
        if not location:
            raise ResponseAssertionError("Location header is absent, can't follow", self)
        return self.jump(location)


__all__ = ["Response", "RestResponse"]
