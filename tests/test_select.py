from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pytest

from abpdev.errors import UserInputError
from abpdev.projects.discover import ProjectCandidate
from abpdev.projects.select import (
    InteractiveSelection,
    UsageOutcome,
    UsagePrinter,
    select_project,
)


def _candidate(path: str) -> ProjectCandidate:
    full_path = Path(path)
    return ProjectCandidate(short_name=full_path.name, full_path=full_path, directory=full_path.parent)


CANDIDATES = [
    _candidate("/repo/src/Acme.Admin/Acme.Admin.csproj"),
    _candidate("/repo/src/Acme.Host/Acme.Host.csproj"),
    _candidate("/repo/src/Acme.HostWithIds/Acme.HostWithIds.csproj"),
]


def _failing_prompt(names: Sequence[str]) -> int:
    raise AssertionError("prompt must not be shown")


def test_explicit_name_matches_path_substring() -> None:
    selected = select_project(CANDIDATES, "Admin", UsagePrinter())

    assert selected is CANDIDATES[0]


def test_explicit_name_first_match_wins() -> None:
    selected = select_project(CANDIDATES, "Acme.Host", UsagePrinter())

    assert selected is CANDIDATES[1]


def test_explicit_name_skips_prompt_even_when_interactive() -> None:
    selected = select_project(CANDIDATES, "HostWithIds", InteractiveSelection(prompt=_failing_prompt))

    assert selected is CANDIDATES[2]


def test_explicit_name_without_match_raises() -> None:
    with pytest.raises(UserInputError, match="No project found with the name 'Gateway'"):
        select_project(CANDIDATES, "Gateway", UsagePrinter())


def test_interactive_returns_prompted_candidate() -> None:
    seen: list[list[str]] = []

    def prompt(names: Sequence[str]) -> int:
        seen.append(list(names))
        return 1

    selected = select_project(CANDIDATES, None, InteractiveSelection(prompt=prompt))

    assert selected is CANDIDATES[1]
    assert seen == [["Acme.Admin.csproj", "Acme.Host.csproj", "Acme.HostWithIds.csproj"]]


def test_interactive_with_no_candidates_falls_back_to_usage() -> None:
    outcome = select_project([], None, InteractiveSelection(prompt=_failing_prompt))

    assert outcome == UsageOutcome(project_names=())
    assert "No runnable projects found." in outcome.render()


def test_usage_printer_lists_short_names() -> None:
    outcome = select_project(CANDIDATES, None, UsagePrinter())

    assert isinstance(outcome, UsageOutcome)
    rendered = outcome.render()
    assert rendered.startswith("You have to pass a project name.")
    assert "\t - Acme.Admin.csproj" in rendered
    assert "\t - Acme.HostWithIds.csproj" in rendered
