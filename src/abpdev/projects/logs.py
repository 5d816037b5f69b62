"""Resolve the log artifact to open for a project."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

LOGS_DIR_NAME = "Logs"
LOG_FILE_NAME = "logs.txt"
NO_LOGS_NOTE = "No logs folder found; opening project folder instead."

ArtifactKind = Literal["file", "directory"]


@dataclass(frozen=True, slots=True)
class LogArtifact:
    """Existing path to hand to the platform opener."""

    kind: ArtifactKind
    path: Path
    note: str | None = None


def locate_log_artifact(project_directory: Path) -> LogArtifact:
    """Prefer ``Logs/logs.txt``, then ``Logs/``, then the project directory itself."""

    logs_dir = project_directory / LOGS_DIR_NAME
    log_file = logs_dir / LOG_FILE_NAME
    if log_file.is_file():
        return LogArtifact(kind="file", path=log_file)
    if logs_dir.is_dir():
        return LogArtifact(kind="directory", path=logs_dir)
    return LogArtifact(kind="directory", path=project_directory, note=NO_LOGS_NOTE)
