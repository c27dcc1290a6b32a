"""Manifest resolution across the supported formats."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from .errors import ManifestNotFoundError
from .logging import get_logger
from .manifests import ManifestReader, default_readers
from .models import ManifestMetadata


class MetadataResolver:
    """Tries manifest readers in priority order and returns the first match."""

    def __init__(self, readers: Optional[Iterable[ManifestReader]] = None) -> None:
        self.readers: List[ManifestReader] = (
            list(readers) if readers is not None else default_readers()
        )
        self.logger = get_logger("resolver")

    def resolve(self, project_dir: Path | str) -> ManifestMetadata:
        """Return metadata from the highest-priority manifest present."""
        root = Path(project_dir)
        for reader in self.readers:
            metadata = reader.read(root)
            if metadata is not None:
                return metadata
            self.logger.debug("No %s in %s", reader.filename, root)

        expected = ", ".join(reader.filename for reader in self.readers)
        raise ManifestNotFoundError(
            f'No supported manifest found in "{root}". '
            f"Expected one of: {expected}. "
            'Check that "project-path" points to the correct directory.'
        )


__all__ = ["MetadataResolver"]
