"""Result channels for action outputs (status, listing-id, listing-url)."""

from __future__ import annotations

import os
import sys
import uuid
from pathlib import Path
from typing import Dict, Mapping, Optional, Protocol, TextIO


class OutputSink(Protocol):
    """Receives named string outputs produced by a run."""

    def set_output(self, name: str, value: str) -> None:
        """Record ``value`` under ``name``."""


class GitHubOutputSink:
    """Appends outputs to the file named by ``GITHUB_OUTPUT``."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def set_output(self, name: str, value: str) -> None:
        if "\n" in value or "\r" in value:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            entry = f"{name}<<{delimiter}\n{value}\n{delimiter}\n"
        else:
            entry = f"{name}={value}\n"
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(entry)


class StreamOutputSink:
    """Writes ``name=value`` lines to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream

    def set_output(self, name: str, value: str) -> None:
        stream = self.stream or sys.stdout
        stream.write(f"{name}={value}\n")
        stream.flush()


class MemoryOutputSink:
    """Keeps outputs in a dict; later values for the same name win."""

    def __init__(self) -> None:
        self.values: Dict[str, str] = {}

    def set_output(self, name: str, value: str) -> None:
        self.values[name] = value


def default_output_sink(environ: Optional[Mapping[str, str]] = None) -> OutputSink:
    """Use the Actions output file when running in a workflow, stdout otherwise."""
    env = os.environ if environ is None else environ
    output_file = env.get("GITHUB_OUTPUT")
    if output_file:
        return GitHubOutputSink(output_file)
    return StreamOutputSink()


__all__ = [
    "GitHubOutputSink",
    "MemoryOutputSink",
    "OutputSink",
    "StreamOutputSink",
    "default_output_sink",
]
