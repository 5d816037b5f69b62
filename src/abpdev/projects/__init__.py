"""Project discovery, selection, and log lookup."""

from abpdev.projects.discover import ProjectCandidate, is_allowed_manifest, scan_projects
from abpdev.projects.logs import LogArtifact, locate_log_artifact
from abpdev.projects.select import (
    InteractiveSelection,
    SelectionStrategy,
    UsageOutcome,
    UsagePrinter,
    find_by_name,
    prompt_for_project,
    select_project,
)

__all__ = [
    "ProjectCandidate",
    "is_allowed_manifest",
    "scan_projects",
    "LogArtifact",
    "locate_log_artifact",
    "InteractiveSelection",
    "UsagePrinter",
    "SelectionStrategy",
    "UsageOutcome",
    "find_by_name",
    "prompt_for_project",
    "select_project",
]
