"""Reader for npm ``package.json`` manifests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

from ..errors import ManifestParseError
from ..models import ManifestMetadata
from .base import ManifestReader
from .fields import unwrap


class PackageJsonReader(ManifestReader):
    """Reads structured JSON manifests; malformed files are a hard failure."""

    filename = "package.json"

    def parse(self, path: Path) -> ManifestMetadata:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ManifestParseError(self.filename, str(exc)) from exc
        if not isinstance(data, dict):
            raise ManifestParseError(self.filename, "top-level value must be an object")

        return ManifestMetadata(
            source=self.filename,
            name=_as_str(data.get("name")),
            version=_as_str(data.get("version")),
            description=_as_str(data.get("description")),
            homepage=_as_str(data.get("homepage")),
            repository=unwrap(data.get("repository"), "url"),
            keywords=_as_str_list(data.get("keywords")),
            author=unwrap(data.get("author"), "name"),
            license=_as_str(data.get("license")),
        )


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _as_str_list(value: Any) -> Optional[List[str]]:
    if not isinstance(value, list):
        return None
    return [item for item in value if isinstance(item, str)]
