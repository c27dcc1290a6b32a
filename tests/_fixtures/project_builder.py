"""Helper utilities for constructing temporary project directories in tests."""

from __future__ import annotations

import json
import textwrap
from pathlib import Path
from typing import Any, Mapping


class ProjectBuilder:
    """Utility for writing manifest files into a throwaway project directory."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "project"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the project."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def write_package_json(self, data: Mapping[str, Any]) -> None:
        """Serialise ``data`` as the project's package.json."""
        (self.root / "package.json").write_text(json.dumps(data), encoding="utf-8")

    def path(self) -> Path:
        """Return the project root path."""
        return self.root


__all__ = ["ProjectBuilder"]
