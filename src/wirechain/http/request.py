# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Immutable fluent request builder."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from ..errors import ConfigurationError
from .body import Content, MultipartBody, RequestBody, to_bytes
from .headers import Headers, content_type_boundary
from .uri import RequestURI, UriParts

if TYPE_CHECKING:
    from ..wire.base import Wire
    from .response import Response

BOUNDARY_REQUIRED = "Content-Type: multipart/form-data requires boundary"


@dataclass(frozen=True)
class Request:
    """
    Immutable HTTP request.

    Every mutator returns a new request. Equality covers method, URI, headers
    and body only: the wire and the timeout describe how the request travels,
    not what it asks for.
    """

    wire: Wire = field(compare=False, repr=False)
    home: str = ""
    method: str = "GET"
    headers: Headers = field(default_factory=Headers)
    content: bytes = b""
    timeout: float | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "home", UriParts.parse(self.home).render())
        object.__setattr__(self, "method", str(self.method).upper())
        if not isinstance(self.headers, Headers):
            object.__setattr__(self, "headers", Headers(self.headers))
        object.__setattr__(self, "content", to_bytes(self.content))

    def uri(self) -> RequestURI:
        return RequestURI(owner=self, parts=UriParts.parse(self.home))

    def body(self) -> RequestBody:
        return RequestBody(owner=self, content=self.content)

    def multipart_body(self) -> MultipartBody:
        """Return a multipart body view; the Content-Type boundary must already be declared."""
        boundary = content_type_boundary(self.headers)
        if not boundary:
            raise ConfigurationError(BOUNDARY_REQUIRED)
        return MultipartBody(owner=self, content=self.content, boundary=boundary)

    def with_uri(self, uri: str) -> Request:
        return replace(self, home=uri)

    def with_method(self, method: str) -> Request:
        return replace(self, method=method)

    def with_header(self, name: str, value: Any) -> Request:
        """Append a header value; earlier values of the same name are kept."""
        return replace(self, headers=self.headers.with_value(name, value))

    def without_header(self, name: str) -> Request:
        return replace(self, headers=self.headers.without(name))

    def with_body(self, body: RequestBody | Content | None) -> Request:
        content = body.content if isinstance(body, RequestBody) else to_bytes(body)
        return replace(self, content=content)

    def with_timeout(self, timeout: float | None) -> Request:
        return replace(self, timeout=timeout)

    def through(self, decorator: Callable[..., Wire], *args: Any, **kwargs: Any) -> Request:
        """Wrap the current wire: ``decorator(current_wire, *args, **kwargs)``."""
        return replace(self, wire=decorator(self.wire, *args, **kwargs))

    def dispatch(self) -> Response:
        """Send the request through the wire chain. The only call that performs I/O."""
        response = self.wire.send(
            self.method,
            self.home,
            self.headers,
            self.content,
            timeout=self.timeout,
        )
        return response.bound_to(self)

    fetch = dispatch


__all__ = ["BOUNDARY_REQUIRED", "Request"]
