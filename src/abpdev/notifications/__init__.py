"""Desktop notifications delivered through transient interpreter scripts."""

from abpdev.notifications.dispatcher import (
    TOAST_COMMAND,
    NotificationDispatcher,
    NotificationRequest,
    NotificationResult,
    build_notification_dispatcher,
    compose_toast_command,
    quote_powershell,
)
from abpdev.notifications.scripts import ScriptRunResult, TransientScriptRunner, transient_script

__all__ = [
    "TOAST_COMMAND",
    "NotificationDispatcher",
    "NotificationRequest",
    "NotificationResult",
    "build_notification_dispatcher",
    "compose_toast_command",
    "quote_powershell",
    "ScriptRunResult",
    "TransientScriptRunner",
    "transient_script",
]
