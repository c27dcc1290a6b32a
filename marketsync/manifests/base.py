"""Base classes for manifest readers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from ..errors import ManifestNotFoundError, ManifestParseError
from ..logging import get_logger
from ..models import ManifestMetadata


class ManifestReader(ABC):
    """Contract for readers that extract project identity from one manifest kind."""

    filename: str = ""

    def __init__(self) -> None:
        self.logger = get_logger(f"manifests.{self.name}")

    @property
    def name(self) -> str:
        return self.filename.lower().replace(".", "_")

    def detect(self, project_dir: Path) -> bool:
        """Return True when this reader's manifest exists in ``project_dir``."""
        return (project_dir / self.filename).is_file()

    def read(self, project_dir: Path) -> Optional[ManifestMetadata]:
        """Parse the manifest when present; a missing file is normal absence."""
        if not self.detect(project_dir):
            return None
        metadata = self.parse(project_dir / self.filename)
        self.logger.info("Found %s", self.filename)
        return metadata

    @abstractmethod
    def parse(self, path: Path) -> ManifestMetadata:
        """Extract metadata from an existing manifest file."""


__all__ = ["ManifestNotFoundError", "ManifestParseError", "ManifestReader"]
