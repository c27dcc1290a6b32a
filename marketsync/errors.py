"""Exception hierarchy shared across marketsync components."""

from __future__ import annotations

from typing import Sequence


class MarketSyncError(RuntimeError):
    """Base class for failures that abort a submission run."""


class ConfigError(MarketSyncError):
    """Raised when action inputs or the config file are unusable."""


class ManifestError(MarketSyncError):
    """Base class for manifest discovery and parsing failures."""


class ManifestParseError(ManifestError):
    """Raised when a structured manifest exists but cannot be parsed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to parse {path}: {reason}")
        self.path = path
        self.reason = reason


class ManifestNotFoundError(ManifestError):
    """Raised when no supported manifest exists in the project directory."""


class ValidationError(MarketSyncError):
    """Raised when required payload fields are missing or empty."""

    def __init__(self, errors: Sequence[str]) -> None:
        self.errors = list(errors)
        lines = "\n".join(f"  {index}. {error}" for index, error in enumerate(self.errors, 1))
        super().__init__(f"Payload validation failed:\n{lines}")


class WarningPolicyError(MarketSyncError):
    """Raised when fail-on-warning escalates validation warnings."""

    def __init__(self, warnings: Sequence[str]) -> None:
        self.warnings = list(warnings)
        super().__init__(
            f"fail-on-warning is enabled and {len(self.warnings)} warning(s) were raised."
        )


class RegistryError(MarketSyncError):
    """Base class for marketplace API failures."""


class NetworkError(RegistryError):
    """Raised when the marketplace API cannot be reached."""


class RemoteError(RegistryError):
    """Raised when the marketplace API answers with a non-2xx status."""

    def __init__(self, status: int, detail: str, url: str) -> None:
        super().__init__(f"Marketplace API returned HTTP {status}: {detail}. URL: {url}")
        self.status = status
        self.detail = detail
        self.url = url


__all__ = [
    "ConfigError",
    "ManifestError",
    "ManifestNotFoundError",
    "ManifestParseError",
    "MarketSyncError",
    "NetworkError",
    "RegistryError",
    "RemoteError",
    "ValidationError",
    "WarningPolicyError",
]
