"""Console notifier module."""

from maven_watch.notifiers.console.config import ConsoleConfig
from maven_watch.notifiers.console.manifest import console_manifest
from maven_watch.notifiers.console.notifier import ConsoleNotifier

__all__ = ["ConsoleConfig", "ConsoleNotifier", "console_manifest"]
