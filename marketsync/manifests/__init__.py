"""Manifest readers and their fixed resolution order."""

from __future__ import annotations

from typing import Callable, List

from .base import ManifestReader
from .cargo import CargoReader
from .package_json import PackageJsonReader
from .pyproject import PyprojectReader

# Resolution order: first detected manifest wins.
_BUILTIN_FACTORIES: List[Callable[[], ManifestReader]] = [
    PackageJsonReader,
    PyprojectReader,
    CargoReader,
]


def default_readers() -> List[ManifestReader]:
    """Return fresh reader instances in resolution order."""
    return [factory() for factory in _BUILTIN_FACTORIES]


def supported_manifests() -> List[str]:
    return [reader.filename for reader in default_readers()]


__all__ = [
    "CargoReader",
    "ManifestReader",
    "PackageJsonReader",
    "PyprojectReader",
    "default_readers",
    "supported_manifests",
]
