"""Normalization for manifest fields that may be a string or an object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union


@dataclass(frozen=True)
class BareValue:
    """Field declared as a plain string, e.g. ``"repository": "https://..."``."""

    value: str


@dataclass(frozen=True)
class StructuredValue:
    """Field declared as an object, e.g. ``"author": {"name": "Ada"}``."""

    fields: Mapping[str, Any]


ManifestField = Union[BareValue, StructuredValue]


def classify(raw: Any) -> Optional[ManifestField]:
    """Tag a raw decoded value, returning None for anything unusable."""
    if isinstance(raw, str):
        return BareValue(raw)
    if isinstance(raw, Mapping):
        return StructuredValue(dict(raw))
    return None


def unwrap(raw: Any, key: str) -> Optional[str]:
    """Resolve a string-or-object field to a string.

    Structured values yield their ``key`` member (``url`` for repositories,
    ``name`` for authors) when it is a string.
    """
    tagged = classify(raw)
    if isinstance(tagged, BareValue):
        return tagged.value
    if isinstance(tagged, StructuredValue):
        inner = tagged.fields.get(key)
        return inner if isinstance(inner, str) else None
    return None


__all__ = ["BareValue", "ManifestField", "StructuredValue", "classify", "unwrap"]
