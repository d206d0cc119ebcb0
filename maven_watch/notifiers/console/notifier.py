"""Notifier writing run notifications to the log."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from maven_watch.notification import Notification
from maven_watch.notifiers.base import Notifier
from maven_watch.notifiers.console.config import ConsoleConfig


@dataclass(frozen=True, kw_only=True)
class ConsoleNotifier(Notifier):
    """Logs notifications, at a higher level for failed runs."""

    config: ConsoleConfig

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: ConsoleConfig
    ) -> AsyncGenerator["ConsoleNotifier", None]:
        yield cls(config=config)

    async def notify(self, notification: Notification) -> None:
        log = logging.getLogger(self.config.logger_name)
        level = (
            logging.INFO
            if notification.image == "success"
            else logging.getLevelName(self.config.failure_level)
        )
        header = notification.title
        if notification.name:
            header += f" [{', '.join(notification.name.splitlines())}]"
        message = " | ".join(line for line in notification.message.splitlines() if line)
        log.log(level, "%s: %s", header, message)
