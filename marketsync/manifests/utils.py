"""Best-effort, line-oriented extraction helpers for key = value manifests."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional

_QUOTED = re.compile(r"\"([^\"\n]*)\"|'([^'\n]*)'")


def read_text(path: Path) -> str:
    """Read a manifest without ever failing on undecodable bytes."""
    return path.read_text(encoding="utf-8", errors="replace")


def _key_pattern(key: str) -> str:
    escaped = re.escape(key)
    return rf"^[ \t]*(?:{escaped}|\"{escaped}\"|'{escaped}')[ \t]*=[ \t]*"


def extract_string(text: str, key: str) -> Optional[str]:
    """Return the first ``key = "value"`` string at the start of a line."""
    pattern = re.compile(_key_pattern(key) + r"(?:\"([^\"\n]*)\"|'([^'\n]*)')", re.MULTILINE)
    match = pattern.search(text)
    if not match:
        return None
    return match.group(1) if match.group(1) is not None else match.group(2)


def extract_list(text: str, key: str) -> Optional[List[str]]:
    """Return the entries of a ``key = [...]`` array, which may span lines."""
    pattern = re.compile(_key_pattern(key) + r"\[(.*?)\]", re.MULTILINE | re.DOTALL)
    match = pattern.search(text)
    if not match:
        return None
    body = match.group(1)
    if _QUOTED.search(body):
        entries = [double or single for double, single in _QUOTED.findall(body)]
    else:
        entries = body.split(",")
    return [entry.strip() for entry in entries if entry.strip()]


def extract_inline_table_value(text: str, key: str, inner: str) -> Optional[str]:
    """Return ``inner`` from ``key = {inner = "value", ...}``."""
    pattern = re.compile(
        _key_pattern(key) + r"\{[^}]*?\b" + re.escape(inner) + r"[ \t]*=[ \t]*\"([^\"\n]*)\"",
        re.MULTILINE,
    )
    match = pattern.search(text)
    return match.group(1) if match else None


def extract_first_table_in_array(text: str, key: str, inner: str) -> Optional[str]:
    """Return ``inner`` from the first table of ``key = [{inner = "value"}, ...]``."""
    pattern = re.compile(
        _key_pattern(key)
        + r"\[\s*\{[^}]*?\b"
        + re.escape(inner)
        + r"[ \t]*=[ \t]*\"([^\"\n]*)\"",
        re.MULTILINE | re.DOTALL,
    )
    match = pattern.search(text)
    return match.group(1) if match else None


def strip_email(person: str) -> str:
    """Turn ``"Ada Lovelace <ada@example.com>"`` into ``"Ada Lovelace"``."""
    return re.sub(r"\s*<[^>]*>\s*$", "", person).strip()


__all__ = [
    "extract_first_table_in_array",
    "extract_inline_table_value",
    "extract_list",
    "extract_string",
    "read_text",
    "strip_email",
]
