from __future__ import annotations

import sys
from pathlib import Path

import pytest

from abpdev.config import load_settings
from abpdev.notifications.dispatcher import (
    NotificationDispatcher,
    NotificationRequest,
    build_notification_dispatcher,
    compose_toast_command,
)
from abpdev.notifications.scripts import ScriptRunResult, TransientScriptRunner


class RecordingRunner:
    def __init__(self, returncode: int = 0) -> None:
        self.returncode = returncode
        self.contents: list[str] = []

    async def run(self, content: str) -> ScriptRunResult:
        self.contents.append(content)
        return ScriptRunResult(script_path=Path("unused.ps1"), returncode=self.returncode)


def test_compose_title_only() -> None:
    command = compose_toast_command(NotificationRequest(title="Build Done"))

    assert command == 'New-BurntToastNotification -Text "Build Done"'


def test_compose_with_message_and_icon() -> None:
    request = NotificationRequest(title="Build Done", message="All green", icon=r"C:\icons\ok.png")

    assert compose_toast_command(request) == (
        'New-BurntToastNotification -Text "Build Done", "All green" -AppLogo "C:\\icons\\ok.png"'
    )


def test_compose_skips_empty_segments() -> None:
    request = NotificationRequest(title="Done", message="", icon="")

    assert compose_toast_command(request) == 'New-BurntToastNotification -Text "Done"'


def test_compose_escapes_quotes_and_variables() -> None:
    request = NotificationRequest(title='Say "hi"', message="cost $5")

    assert compose_toast_command(request) == (
        'New-BurntToastNotification -Text "Say `"hi`"", "cost `$5"'
    )


@pytest.mark.asyncio
async def test_send_delegates_composed_command() -> None:
    runner = RecordingRunner()
    dispatcher = NotificationDispatcher(enabled=True, runner=runner)

    result = await dispatcher.send("Build Done", message="ok")

    assert result.status == "sent"
    assert result.returncode == 0
    assert runner.contents == ['New-BurntToastNotification -Text "Build Done", "ok"']


@pytest.mark.asyncio
async def test_send_reports_failed_exit() -> None:
    dispatcher = NotificationDispatcher(enabled=True, runner=RecordingRunner(returncode=1))

    result = await dispatcher.send("Build Done")

    assert result.status == "failed"
    assert result.returncode == 1


@pytest.mark.asyncio
async def test_disabled_gate_does_no_io(app_data_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    async def _no_spawn(*args, **kwargs):
        raise AssertionError("no process may be spawned")

    monkeypatch.setattr("asyncio.create_subprocess_exec", _no_spawn)
    runner = TransientScriptRunner(app_data_dir, tools={"powershell": "powershell"})
    dispatcher = NotificationDispatcher(enabled=False, runner=runner)

    result = await dispatcher.send("Build Done", message="ok", icon="logo.png")

    assert result.status == "disabled"
    assert not app_data_dir.exists()


@pytest.mark.parametrize(
    ("title", "message", "icon"),
    [
        ("Build Done", None, None),
        ("Build Done", "All tests passed", None),
        ("Build Done", None, "logo.png"),
        ("Build Done", "All tests passed", "logo.png"),
    ],
)
@pytest.mark.asyncio
async def test_script_never_outlives_send(
    app_data_dir: Path,
    title: str,
    message: str | None,
    icon: str | None,
) -> None:
    # The PowerShell text is not valid Python, so this also covers the failing-interpreter path.
    runner = TransientScriptRunner(app_data_dir, tools={"python": sys.executable}, interpreter_key="python")
    dispatcher = NotificationDispatcher(enabled=True, runner=runner)

    result = await dispatcher.send(title, message=message, icon=icon)

    assert result.status == "failed"
    assert list(app_data_dir.iterdir()) == []


def test_build_from_settings(write_settings, app_data_dir: Path) -> None:
    settings = load_settings(
        write_settings(
            notifications={"enabled": False, "interpreter_key": "pwsh", "script_suffix": ".ps1"},
            tools={"pwsh": "/usr/bin/pwsh"},
        )
    )

    dispatcher = build_notification_dispatcher(settings)

    assert dispatcher.enabled is False
    assert isinstance(dispatcher.runner, TransientScriptRunner)
    assert dispatcher.runner.directory == app_data_dir
    assert dispatcher.runner.resolve_interpreter() == "/usr/bin/pwsh"
