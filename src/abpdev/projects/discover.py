"""Discover runnable project manifests inside a source tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from abpdev.errors import NotFoundError

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProjectCandidate:
    """A discovered project manifest eligible for log lookup."""

    short_name: str
    full_path: Path
    directory: Path

    @classmethod
    def from_manifest(cls, manifest_path: Path) -> "ProjectCandidate":
        resolved = manifest_path.resolve(strict=False)
        return cls(short_name=resolved.name, full_path=resolved, directory=resolved.parent)


def is_allowed_manifest(manifest_path: Path, allowed_names: Iterable[str]) -> bool:
    """Return True when the manifest stem ends with one of the allowed names."""

    stem = manifest_path.stem
    return any(stem.endswith(name) for name in allowed_names if name)


def scan_projects(
    working_dir: Path,
    allowed_names: Iterable[str],
    *,
    manifest_suffix: str = ".csproj",
    logger: logging.Logger | None = None,
) -> list[ProjectCandidate]:
    """Recursively find manifests under ``working_dir`` whose stem ends with an allowed name."""

    effective_logger = logger or LOGGER
    if not working_dir.is_dir():
        raise NotFoundError(working_dir)

    allowed = tuple(allowed_names)
    suffix = manifest_suffix.lower()
    effective_logger.info("discover.scan_started working_dir=%s allowed_names=%s", working_dir, len(allowed))

    candidates: list[ProjectCandidate] = []
    for file_path in sorted(working_dir.rglob("*")):
        if not file_path.is_file() or file_path.suffix.lower() != suffix:
            continue
        if not is_allowed_manifest(file_path, allowed):
            continue
        candidates.append(ProjectCandidate.from_manifest(file_path))

    effective_logger.info("discover.scan_finished working_dir=%s matched=%s", working_dir, len(candidates))
    return candidates
