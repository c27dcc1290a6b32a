"""Reader for Python ``pyproject.toml`` manifests."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..models import ManifestMetadata
from .base import ManifestReader
from .utils import (
    extract_first_table_in_array,
    extract_inline_table_value,
    extract_list,
    extract_string,
    read_text,
)


class PyprojectReader(ManifestReader):
    """Pattern-based reader for ``[project]`` metadata; every field is optional."""

    filename = "pyproject.toml"

    def parse(self, path: Path) -> ManifestMetadata:
        text = read_text(path)
        return ManifestMetadata(
            source=self.filename,
            name=extract_string(text, "name"),
            version=extract_string(text, "version"),
            description=extract_string(text, "description"),
            homepage=_with_capitalized(text, "homepage"),
            repository=_with_capitalized(text, "repository"),
            keywords=extract_list(text, "keywords"),
            author=extract_first_table_in_array(text, "authors", "name"),
            license=_license(text),
        )


def _with_capitalized(text: str, key: str) -> Optional[str]:
    # [project.urls] conventionally uses "Homepage" / "Repository"
    value = extract_string(text, key)
    if value:
        return value
    return extract_string(text, key.capitalize()) or value


def _license(text: str) -> Optional[str]:
    value = extract_string(text, "license")
    if value is None:
        value = extract_inline_table_value(text, "license", "text")
    return value
