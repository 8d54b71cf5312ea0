# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Body views of a request: plain/form-encoded and multipart."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any
from urllib.parse import quote_plus

from .headers import header_value

if TYPE_CHECKING:
    from .request import Request

Content = str | bytes | bytearray | memoryview | Mapping[str, Any] | list[Any]


def to_bytes(content: Content | None) -> bytes:
    """Serialize body content; structured values become compact JSON."""
    if content is None:
        return b""
    if isinstance(content, (bytes, bytearray, memoryview)):
        return bytes(content)
    if isinstance(content, str):
        return content.encode("utf-8")
    if isinstance(content, (Mapping, list)):
        return json.dumps(content, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
    raise TypeError(f"Unsupported body content: {type(content).__name__}")


@dataclass(frozen=True)
class RequestBody:
    """Fluent, immutable view of a request payload."""

    owner: Request = field(compare=False, repr=False)
    content: bytes = b""

    @property
    def content_type(self) -> str:
        return header_value(self.owner.headers, "Content-Type")

    def get(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def raw(self) -> bytes:
        return self.content

    def set(self, content: Content) -> RequestBody:
        return replace(self, content=to_bytes(content))

    def form_param(self, name: str, value: Any) -> RequestBody:
        """Append one ``application/x-www-form-urlencoded`` parameter."""
        pair = f"{quote_plus(str(name))}={quote_plus('' if value is None else str(value))}".encode("ascii")
        content = self.content + b"&" + pair if self.content else pair
        return replace(self, content=content)

    def form_params(self, params: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> RequestBody:
        items = params.items() if isinstance(params, Mapping) else params
        view = self
        for name, value in items:
            view = view.form_param(name, value)
        return view

    def back(self) -> Request:
        return self.owner.with_body(self.content)

    def __str__(self) -> str:
        return self.get()


@dataclass(frozen=True)
class MultipartBody(RequestBody):
    """
    ``multipart/form-data`` body view.

    The boundary comes from the owner's Content-Type header and is validated
    by ``Request.multipart_body()`` before this view exists.
    """

    boundary: str = ""

    @property
    def _closing(self) -> bytes:
        return f"--{self.boundary}--\r\n".encode("ascii")

    def form_param(self, name: str, value: Any) -> MultipartBody:
        closing = self._closing
        head = self.content[: -len(closing)] if self.content.endswith(closing) else self.content
        disposition = 'Content-Disposition: form-data; name="{}"'.format(str(name).replace('"', "%22"))
        if isinstance(value, (bytes, bytearray)):
            payload = bytes(value)
        else:
            payload = ("" if value is None else str(value)).encode("utf-8")
        part = f"--{self.boundary}\r\n{disposition}\r\n\r\n".encode("utf-8") + payload + b"\r\n"
        return replace(self, content=head + part + closing)


__all__ = ["MultipartBody", "RequestBody", "to_bytes"]
