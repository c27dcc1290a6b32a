"""Core data models shared across marketsync components."""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ManifestMetadata:
    """Project identity read from a single manifest file.

    ``None`` means the manifest did not declare the field at all; an empty
    string means it was declared but left blank.
    """

    source: str
    name: Optional[str] = None
    version: Optional[str] = None
    description: Optional[str] = None
    homepage: Optional[str] = None
    repository: Optional[str] = None
    keywords: Optional[List[str]] = None
    author: Optional[str] = None
    license: Optional[str] = None


@dataclass
class ListingMetadata:
    """Provenance block attached to every submission."""

    author: str
    release_tag: str
    submitted_at: str
    github_action: bool = True
    github_run_id: str = ""
    github_sha: str = ""


@dataclass
class SubmissionPayload:
    """Listing record sent to the marketplace API."""

    name: str
    version: str
    description: str
    category: str
    repository: str
    metadata: ListingMetadata
    homepage: str = ""
    long_description: str = ""
    changelog: str = ""
    license: str = ""
    pricing: str = "free"
    min_near_version: str = ""
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON body expected by the listings endpoints."""
        return {
            "name": self.name,
            "version": self.version,
            "description": self.description,
            "long_description": self.long_description,
            "category": self.category,
            "homepage": self.homepage,
            "repository": self.repository,
            "license": self.license,
            "changelog": self.changelog,
            "pricing": self.pricing,
            "min_near_version": self.min_near_version,
            "tags": list(self.tags),
            "metadata": asdict(self.metadata),
        }


@dataclass
class RemoteResult:
    """Outcome of a create or update call against the marketplace."""

    listing_id: str
    status: str
    listing_url: str
    body: Any = None


@dataclass
class RunOutcome:
    """Final state of one submission run, mirrored into the action outputs."""

    status: str
    listing_id: str = ""
    listing_url: str = ""
    warnings: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        """True when the run ended in an error."""
        return self.status == "error"
