"""Assembly of the listing submission payload."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Callable, List, Optional, Sequence

from .config import PayloadOverrides
from .context import ReleaseContext
from .models import ListingMetadata, ManifestMetadata, SubmissionPayload

DEFAULT_CATEGORY = "development"
DEFAULT_LICENSE = "MIT"
DEFAULT_PRICING = "free"


class PayloadBuilder:
    """Merges overrides, manifest metadata and computed defaults.

    Precedence per field is strict: a non-blank override wins, then any value
    the manifest declared (even an empty one), then the computed default.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or (lambda: datetime.now(UTC))

    def build(
        self,
        metadata: ManifestMetadata,
        overrides: PayloadOverrides,
        context: ReleaseContext,
    ) -> SubmissionPayload:
        return SubmissionPayload(
            name=_pick(overrides.name, metadata.name, ""),
            version=_pick(overrides.version, metadata.version, context.tag),
            description=_pick(overrides.description, metadata.description, ""),
            long_description=_pick(overrides.long_description, None, ""),
            category=_pick(overrides.category, None, DEFAULT_CATEGORY),
            homepage=_pick(overrides.homepage, metadata.homepage, ""),
            repository=_pick(overrides.repository, metadata.repository, context.repository_url),
            license=_pick(overrides.license, metadata.license, DEFAULT_LICENSE),
            changelog=_pick(overrides.changelog, None, ""),
            pricing=_pick(overrides.pricing, None, DEFAULT_PRICING),
            min_near_version=_pick(overrides.min_near_version, None, ""),
            tags=_resolve_tags(overrides.tags, metadata.keywords),
            metadata=ListingMetadata(
                author=metadata.author or context.actor,
                release_tag=context.ref,
                submitted_at=_isoformat(self._clock()),
                github_action=True,
                github_run_id=context.run_id,
                github_sha=context.sha,
            ),
        )


def split_tags(raw: str) -> List[str]:
    """Split a comma-separated tag list, trimming entries and dropping blanks."""
    return [tag.strip() for tag in raw.split(",") if tag.strip()]


def _resolve_tags(override: Optional[str], keywords: Optional[Sequence[str]]) -> List[str]:
    if override:
        return split_tags(override)
    return list(keywords or [])


def _pick(override: Optional[str], manifest_value: Optional[str], default: str) -> str:
    if override is not None and override.strip():
        return override
    if manifest_value is not None:
        return manifest_value
    return default


def _isoformat(moment: datetime) -> str:
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


__all__ = ["PayloadBuilder", "split_tags"]
