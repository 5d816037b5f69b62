"""Shared utility helpers."""

from abpdev.utils.paths import ensure_directories, remove_file_quietly
from abpdev.utils.platform import open_path

__all__ = [
    "ensure_directories",
    "remove_file_quietly",
    "open_path",
]
