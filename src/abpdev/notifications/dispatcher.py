"""Compose toast notifications and hand them to the script runner."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from abpdev.config import AppSettings
from abpdev.notifications.scripts import TransientScriptRunner

LOGGER = logging.getLogger(__name__)

TOAST_COMMAND = "New-BurntToastNotification"

NotificationStatus = Literal["disabled", "sent", "failed"]


@dataclass(frozen=True, slots=True)
class NotificationRequest:
    """Text and optional icon for one toast."""

    title: str
    message: str | None = None
    icon: str | None = None


@dataclass(frozen=True, slots=True)
class NotificationResult:
    status: NotificationStatus
    returncode: int | None = None


def quote_powershell(value: str) -> str:
    """Wrap ``value`` in double quotes, escaping characters PowerShell expands."""

    escaped = value.replace("`", "``").replace('"', '`"').replace("$", "`$")
    return f'"{escaped}"'


def compose_toast_command(request: NotificationRequest) -> str:
    """Build the single-line BurntToast invocation for ``request``."""

    command = f"{TOAST_COMMAND} -Text {quote_powershell(request.title)}"
    if request.message:
        command += f", {quote_powershell(request.message)}"
    if request.icon:
        command += f" -AppLogo {quote_powershell(request.icon)}"
    return command


class NotificationDispatcher:
    """Send desktop notifications unless they are switched off."""

    def __init__(
        self,
        enabled: bool,
        runner: TransientScriptRunner,
        logger: logging.Logger | None = None,
    ) -> None:
        self.enabled = enabled
        self.runner = runner
        self.logger = logger or LOGGER

    async def send(self, title: str, message: str | None = None, icon: str | None = None) -> NotificationResult:
        if not self.enabled:
            return NotificationResult(status="disabled")

        request = NotificationRequest(title=title, message=message, icon=icon)
        self.logger.info("notifications.send title=%s", request.title)
        result = await self.runner.run(compose_toast_command(request))
        status: NotificationStatus = "sent" if result.ok else "failed"
        return NotificationResult(status=status, returncode=result.returncode)


def build_notification_dispatcher(
    settings: AppSettings,
    logger: logging.Logger | None = None,
) -> NotificationDispatcher:
    """Wire a dispatcher from explicit settings values."""

    runner = TransientScriptRunner(
        directory=settings.paths.app_data_root,
        tools=settings.tools,
        interpreter_key=settings.notifications.interpreter_key,
        suffix=settings.notifications.script_suffix,
        logger=logger,
    )
    return NotificationDispatcher(enabled=settings.notifications.enabled, runner=runner, logger=logger)
