"""Tests for string-or-object manifest field normalization."""

from __future__ import annotations

from marketsync.manifests.fields import BareValue, StructuredValue, classify, unwrap


def test_classify_tags_strings_and_objects() -> None:
    assert classify("https://x") == BareValue("https://x")
    assert classify({"url": "https://x"}) == StructuredValue({"url": "https://x"})
    assert classify(None) is None
    assert classify(["a"]) is None


def test_unwrap_structured_repository() -> None:
    assert unwrap({"type": "git", "url": "https://x"}, "url") == "https://x"


def test_unwrap_bare_value_ignores_key() -> None:
    assert unwrap("Alice", "name") == "Alice"


def test_unwrap_missing_or_non_string_member() -> None:
    assert unwrap({"type": "git"}, "url") is None
    assert unwrap({"name": 5}, "name") is None
    assert unwrap(42, "name") is None
