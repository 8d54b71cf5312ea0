# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URI view of a request and the URL helpers it is built on."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any
from urllib.parse import quote, unquote, urljoin, urlsplit, urlunsplit

from ..errors import ConfigurationError

if TYPE_CHECKING:
    from .request import Request

_PCT_TRIPLET = re.compile(r"%[0-9A-Fa-f]{2}")
_SUB_DELIMS = "!$&'()*+,;="
_USERINFO_SAFE = _SUB_DELIMS + ":"
_PATH_SAFE = _SUB_DELIMS + ":@/"


def encode_component(value: str, safe: str) -> str:
    """
    Percent-encode ``value`` as UTF-8, leaving ``safe`` characters and
    existing ``%XX`` triplets untouched.
    """
    out: list[str] = []
    pos = 0
    for match in _PCT_TRIPLET.finditer(value):
        out.append(quote(value[pos : match.start()], safe=safe))
        out.append(match.group(0).upper())
        pos = match.end()
    out.append(quote(value[pos:], safe=safe))
    return "".join(out)


def _split_host_port(hostport: str) -> tuple[str, int | None]:
    if hostport.startswith("["):
        end = hostport.find("]")
        if end != -1:
            host, rest = hostport[: end + 1], hostport[end + 1 :]
            port = rest[1:] if rest.startswith(":") else ""
            return host, int(port) if port.isdigit() else None
    host, sep, port = hostport.rpartition(":")
    if sep and port.isdigit():
        return host, int(port)
    if sep and not port:
        return host, None
    return hostport, None


@dataclass(frozen=True)
class UriParts:
    """Raw components of an absolute URI, kept in their encoded form."""

    scheme: str = ""
    user_info: str | None = None
    host: str = ""
    port: int | None = None
    path: str = ""
    query: str = ""
    fragment: str = ""

    @classmethod
    def parse(cls, uri: str) -> UriParts:
        parts = urlsplit(str(uri or "").strip())
        user_info: str | None = None
        hostport = parts.netloc
        if "@" in hostport:
            user_info, _, hostport = hostport.rpartition("@")
        host, port = _split_host_port(hostport)
        path = parts.path
        if parts.scheme and host and not path:
            path = "/"
        return cls(
            scheme=parts.scheme,
            user_info=user_info,
            host=host,
            port=port,
            path=path,
            query=parts.query,
            fragment=parts.fragment,
        )

    @property
    def authority(self) -> str:
        if not (self.host or self.user_info or self.port is not None):
            return ""
        prefix = f"{self.user_info}@" if self.user_info is not None else ""
        suffix = f":{self.port}" if self.port is not None else ""
        return f"{prefix}{self.host}{suffix}"

    def render(self) -> str:
        return urlunsplit((self.scheme, self.authority, self.path, self.query, self.fragment))

    def credentials(self) -> tuple[str, str] | None:
        """Decoded (username, password) from the user-info component."""
        if self.user_info is None:
            return None
        user, _, password = self.user_info.partition(":")
        return unquote(user), unquote(password)


def strip_user_info(uri: str) -> str:
    return replace(UriParts.parse(uri), user_info=None).render()


def resolve(base: str, reference: str) -> str:
    """Resolve a (possibly relative) reference such as a Location header."""
    return urljoin(base, reference)


def same_origin(a: str, b: str) -> bool:
    """Return True when both URLs share the same scheme + host + port."""
    pa = UriParts.parse(a)
    pb = UriParts.parse(b)
    return (pa.scheme.lower(), pa.host.lower(), pa.port) == (pb.scheme.lower(), pb.host.lower(), pb.port)


@dataclass(frozen=True)
class RequestURI:
    """
    Fluent, immutable view of the URI of a request.

    Every edit returns a new view; ``back()`` derives a new request from the
    owning one with this view's URI installed.
    """

    owner: Request = field(compare=False, repr=False)
    parts: UriParts = field(default_factory=UriParts)

    def get(self) -> str:
        return self.parts.render()

    def set(self, uri: str) -> RequestURI:
        return replace(self, parts=UriParts.parse(uri))

    def path(self, segment: str) -> RequestURI:
        """Append a path segment with exactly one slash before it."""
        encoded = encode_component(str(segment), _PATH_SAFE)
        base = self.parts.path.rstrip("/")
        return replace(self, parts=replace(self.parts, path=f"{base}/{encoded.lstrip('/')}"))

    def query_param(self, key: str, value: Any) -> RequestURI:
        pair = f"{quote(str(key), safe='')}={quote('' if value is None else str(value), safe='')}"
        query = f"{self.parts.query}&{pair}" if self.parts.query else pair
        return replace(self, parts=replace(self.parts, query=query))

    def query_params(self, params: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> RequestURI:
        items = params.items() if isinstance(params, Mapping) else params
        view = self
        for key, value in items:
            view = view.query_param(key, value)
        return view

    def port(self, port: int) -> RequestURI:
        port = int(port)
        if not 0 <= port <= 65535:
            raise ConfigurationError(f"Port {port} is out of range 0-65535")
        return replace(self, parts=replace(self.parts, port=port))

    def user_info(self, info: str | None) -> RequestURI:
        encoded = None if info is None else encode_component(str(info), _USERINFO_SAFE)
        return replace(self, parts=replace(self.parts, user_info=encoded))

    def back(self) -> Request:
        return self.owner.with_uri(self.get())

    def __str__(self) -> str:
        return self.get()


__all__ = [
    "RequestURI",
    "UriParts",
    "encode_component",
    "resolve",
    "same_origin",
    "strip_user_info",
]
