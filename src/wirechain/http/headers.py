# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Ordered, case-insensitive header multimap.

HTTP header field names are case-insensitive (RFC 9110) and a field may repeat.
`Headers` keeps every (name, value) pair in insertion order with the caller's
original casing, and compares names case-insensitively for lookups and equality.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Union

HeaderPairs = Union["Headers", Mapping[str, str], Iterable[tuple[str, str]], None]


class Headers:
    """Immutable ordered multimap of HTTP headers."""

    __slots__ = ("_items",)

    def __init__(self, items: HeaderPairs = None):
        self._items: tuple[tuple[str, str], ...] = tuple(_coerce_pairs(items))

    def with_value(self, name: str, value: Any) -> Headers:
        """Return a copy with one more value appended for ``name``."""
        return Headers(self._items + ((str(name), "" if value is None else str(value)),))

    def without(self, name: str) -> Headers:
        """Return a copy with every value of ``name`` removed."""
        lower = name.lower()
        return Headers(pair for pair in self._items if pair[0].lower() != lower)

    def replaced(self, name: str, value: Any) -> Headers:
        """Return a copy where ``name`` carries exactly one value."""
        return self.without(name).with_value(name, value)

    def get(self, name: str, default: str | None = None) -> str | None:
        lower = name.lower()
        for key, value in self._items:
            if key.lower() == lower:
                return value
        return default

    def get_all(self, name: str) -> list[str]:
        lower = name.lower()
        return [value for key, value in self._items if key.lower() == lower]

    def names(self) -> list[str]:
        seen: dict[str, str] = {}
        for key, _ in self._items:
            seen.setdefault(key.lower(), key)
        return list(seen.values())

    def items(self) -> list[tuple[str, str]]:
        return list(self._items)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return self.get(name) is not None

    def __getitem__(self, name: str) -> str:
        value = self.get(name)
        if value is None:
            raise KeyError(name)
        return value

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def _key(self) -> tuple[tuple[str, str], ...]:
        return tuple((key.lower(), value) for key, value in self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Headers):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Headers({list(self._items)!r})"


def _coerce_pairs(items: HeaderPairs) -> Iterator[tuple[str, str]]:
    """
    Best-effort coercion of header containers into (name, value) pairs.

    Accepts another Headers, plain dicts, httpx.Headers (via ``multi_items``)
    and iterables of pairs.
    """
    if not items:
        return
    if isinstance(items, Headers):
        yield from items.items()
        return
    multi_items = getattr(items, "multi_items", None)
    if callable(multi_items):
        source: Iterable[Any] = multi_items()
    elif isinstance(items, Mapping):
        source = items.items()
    else:
        source = items
    for key, value in source:
        if key is None:
            continue
        name = str(key).strip()
        if not name:
            continue
        yield name, "" if value is None else str(value)


def header_value(headers: HeaderPairs, name: str, default: str = "") -> str:
    """Return a stripped header value using case-insensitive key matching."""
    if not headers or not name:
        return default
    value = Headers(headers).get(name)
    return default if value is None else value.strip()


def parse_header_params(value: str) -> tuple[str, dict[str, str]]:
    """
    Split a header such as ``multipart/form-data; boundary="abc"`` into
    its lowercase main value and a dict of lowercase parameter names.
    """
    main, _, rest = value.partition(";")
    params: dict[str, str] = {}
    for chunk in rest.split(";"):
        key, sep, raw = chunk.partition("=")
        if not sep:
            continue
        key = key.strip().lower()
        raw = raw.strip()
        if len(raw) >= 2 and raw[0] == raw[-1] == '"':
            raw = raw[1:-1]
        if key:
            params[key] = raw
    return main.strip().lower(), params


def content_type_boundary(headers: HeaderPairs) -> str | None:
    """Return the multipart boundary declared in Content-Type, if any."""
    content_type = header_value(headers, "Content-Type")
    if not content_type:
        return None
    media_type, params = parse_header_params(content_type)
    if not media_type.startswith("multipart/"):
        return None
    return params.get("boundary") or None


__all__ = ["Headers", "content_type_boundary", "header_value", "parse_header_params"]
