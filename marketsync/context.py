"""Release context describing the event that triggered a run."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(frozen=True)
class ReleaseContext:
    """Identity of the triggering repository, ref, actor and workflow run."""

    ref: str = ""
    repository: str = ""
    actor: str = ""
    run_id: str = ""
    sha: str = ""
    server_url: str = "https://github.com"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ReleaseContext":
        env = os.environ if environ is None else environ
        return cls(
            ref=env.get("GITHUB_REF", ""),
            repository=env.get("GITHUB_REPOSITORY", ""),
            actor=env.get("GITHUB_ACTOR", ""),
            run_id=env.get("GITHUB_RUN_ID", ""),
            sha=env.get("GITHUB_SHA", ""),
            server_url=env.get("GITHUB_SERVER_URL") or "https://github.com",
        )

    @property
    def owner(self) -> str:
        return self.repository.partition("/")[0]

    @property
    def repo(self) -> str:
        return self.repository.partition("/")[2]

    @property
    def repository_url(self) -> str:
        """Web URL of the repository, or an empty string when it is unknown."""
        if not self.owner or not self.repo:
            return ""
        return f"{self.server_url.rstrip('/')}/{self.owner}/{self.repo}"

    @property
    def tag(self) -> str:
        """The ref with any ``refs/tags/`` prefix removed."""
        return self.ref.removeprefix("refs/tags/")


__all__ = ["ReleaseContext"]
