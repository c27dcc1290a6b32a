"""Reader for Rust ``Cargo.toml`` manifests."""

from __future__ import annotations

from pathlib import Path

from ..models import ManifestMetadata
from .base import ManifestReader
from .utils import extract_list, extract_string, read_text, strip_email


class CargoReader(ManifestReader):
    """Pattern-based reader for ``[package]`` metadata."""

    filename = "Cargo.toml"

    def parse(self, path: Path) -> ManifestMetadata:
        text = read_text(path)
        authors = extract_list(text, "authors")
        return ManifestMetadata(
            source=self.filename,
            name=extract_string(text, "name"),
            version=extract_string(text, "version"),
            description=extract_string(text, "description"),
            homepage=extract_string(text, "homepage"),
            repository=extract_string(text, "repository"),
            keywords=extract_list(text, "keywords"),
            author=strip_email(authors[0]) if authors else None,
            license=extract_string(text, "license"),
        )
