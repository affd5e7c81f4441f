"""Shared helpers for URL encoding and order-preserving deduplication."""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, TypeVar
from urllib.parse import quote

T = TypeVar("T")

# Characters left untouched by JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "!~*'()"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def unique_in_order(items: Iterable[T], key: Callable[[T], Hashable] | None = None) -> list[T]:
    """Keep the first occurrence of each item (or of each key), in input order."""
    seen: set[Hashable] = set()
    kept: list[T] = []
    for item in items:
        marker = key(item) if key else item
        if marker in seen:
            continue
        seen.add(marker)
        kept.append(item)
    return kept


__all__ = ["encode_uri_component", "unique_in_order"]
