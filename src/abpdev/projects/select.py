"""Pick one project candidate by name, by prompt, or fall back to usage text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

import click
import typer

from abpdev.errors import UserInputError
from abpdev.projects.discover import ProjectCandidate

ProjectPrompt = Callable[[Sequence[str]], int]


@dataclass(frozen=True, slots=True)
class InteractiveSelection:
    """Ask the user to pick a project; ``prompt`` returns the chosen index."""

    prompt: ProjectPrompt


@dataclass(frozen=True, slots=True)
class UsagePrinter:
    """Do not select anything; report usage and the available project names."""


SelectionStrategy = InteractiveSelection | UsagePrinter


@dataclass(frozen=True, slots=True)
class UsageOutcome:
    """Successful no-op: no project was named, so usage is shown instead."""

    project_names: tuple[str, ...]

    def render(self) -> str:
        lines = [
            "You have to pass a project name.",
            "",
            "\tUsage:",
            "\tabpdev logs <project-name> [-p <path>] [-i]",
            "",
        ]
        if self.project_names:
            lines.append("Available project names:")
            lines.append("")
            lines.extend(f"\t - {name}" for name in self.project_names)
        else:
            lines.append("No runnable projects found.")
        return "\n".join(lines)


def prompt_for_project(names: Sequence[str]) -> int:
    """Print a numbered menu and block until a valid choice is entered."""

    typer.echo("")
    typer.echo("Choose a project to open logs:")
    for position, name in enumerate(names, start=1):
        typer.echo(f"  {position:>2}) {name}")
    choice = typer.prompt("Project", type=click.IntRange(1, len(names)))
    return choice - 1


def find_by_name(candidates: Sequence[ProjectCandidate], explicit_name: str) -> ProjectCandidate:
    """Return the first candidate whose full path contains ``explicit_name``."""

    for candidate in candidates:
        if explicit_name in str(candidate.full_path):
            return candidate
    raise UserInputError(f"No project found with the name '{explicit_name}'.")


def select_project(
    candidates: Sequence[ProjectCandidate],
    explicit_name: str | None,
    strategy: SelectionStrategy,
) -> ProjectCandidate | UsageOutcome:
    """Resolve one candidate, or a usage outcome when nothing was requested."""

    if explicit_name:
        return find_by_name(candidates, explicit_name)

    if isinstance(strategy, InteractiveSelection) and candidates:
        index = strategy.prompt([candidate.short_name for candidate in candidates])
        return candidates[index]

    return UsageOutcome(project_names=tuple(candidate.short_name for candidate in candidates))
