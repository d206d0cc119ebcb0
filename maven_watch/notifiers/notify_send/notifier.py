"""Desktop notifications through the notify-send command."""

import asyncio
import logging
from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass

from maven_watch.notification import Notification
from maven_watch.notifiers.base import Notifier
from maven_watch.notifiers.notify_send.config import NotifySendConfig

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class NotifySendNotifier(Notifier):
    """Shows notifications on the desktop via libnotify's notify-send."""

    config: NotifySendConfig

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: NotifySendConfig
    ) -> AsyncGenerator["NotifySendNotifier", None]:
        yield cls(config=config)

    def build_command(self, notification: Notification) -> Sequence[str]:
        """Build the notify-send command line for a notification."""
        icon = (
            self.config.success_icon
            if notification.image == "success"
            else self.config.failed_icon
        )
        command = [
            self.config.executable,
            f"--app-name={self.config.app_name}",
            f"--icon={icon}",
            f"--urgency={'normal' if notification.image == 'success' else 'critical'}",
        ]
        if self.config.expire_time_ms is not None:
            command.append(f"--expire-time={self.config.expire_time_ms}")
        command += [notification.title, notification.message]
        return command

    async def notify(self, notification: Notification) -> None:
        command = self.build_command(notification)
        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            log.warning("Cannot run %s: %s", self.config.executable, exc)
            return

        _, stderr = await process.communicate()
        if process.returncode != 0:
            log.warning(
                "%s exited with %d: %s",
                self.config.executable,
                process.returncode,
                stderr.decode(errors="replace").strip(),
            )
