"""Shared fixtures: a fake multi-project source tree and a settings file."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import yaml


def _touch(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def solution_dir(tmp_path: Path) -> Path:
    """Source tree with two runnable projects and one library project."""

    root = tmp_path / "solution"
    _touch(root / "src" / "Acme.Host" / "Acme.Host.csproj", "<Project />")
    _touch(root / "src" / "Acme.Admin" / "Acme.Admin.csproj", "<Project />")
    _touch(root / "src" / "Acme.Other" / "Acme.Other.csproj", "<Project />")
    _touch(root / "README.md", "# Acme")
    return root


@pytest.fixture
def app_data_dir(tmp_path: Path) -> Path:
    return tmp_path / "appdata"


@pytest.fixture
def write_settings(tmp_path: Path, app_data_dir: Path):
    """Write a settings YAML and return its path; keyword overrides replace sections."""

    def _write(**sections: object) -> Path:
        payload: dict[str, object] = {
            "run": {"runnable_projects": ["Host", "Admin"]},
            "notifications": {"enabled": True, "interpreter_key": "powershell", "script_suffix": ".ps1"},
            "tools": {"powershell": "powershell"},
            "paths": {"app_data_root": str(app_data_dir)},
        }
        payload.update(sections)
        settings_file = tmp_path / "config" / "settings.yaml"
        settings_file.parent.mkdir(parents=True, exist_ok=True)
        settings_file.write_text(yaml.safe_dump(payload), encoding="utf-8")
        return settings_file

    return _write


@pytest.fixture
def quiet_cli_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CLI commands from reconfiguring the root logger during tests."""

    monkeypatch.setattr(
        "abpdev.cli.configure_logging",
        lambda log_file, *args, **kwargs: logging.getLogger("abpdev"),
    )
