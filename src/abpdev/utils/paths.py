"""Path and filesystem helper functions."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable


def ensure_directories(paths: Iterable[Path]) -> list[Path]:
    """Create all directories in the iterable if they do not exist."""

    created_or_existing: list[Path] = []
    for directory in paths:
        directory.mkdir(parents=True, exist_ok=True)
        created_or_existing.append(directory)
    return created_or_existing


def remove_file_quietly(path: Path) -> OSError | None:
    """Delete ``path`` if present and return the error instead of raising it."""

    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        return exc
    return None
