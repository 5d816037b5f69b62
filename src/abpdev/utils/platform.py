"""Open files and folders with the operating system's default handler."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

LOGGER = logging.getLogger(__name__)


def open_path(path: Path, logger: logging.Logger | None = None) -> int:
    """Launch the default application for a file, or the file manager for a folder."""

    effective_logger = logger or LOGGER
    effective_logger.info("platform.open path=%s", path)
    return typer.launch(str(path))
