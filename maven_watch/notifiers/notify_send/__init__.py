"""Desktop notifier module using notify-send."""

from maven_watch.notifiers.notify_send.config import NotifySendConfig
from maven_watch.notifiers.notify_send.manifest import notify_send_manifest
from maven_watch.notifiers.notify_send.notifier import NotifySendNotifier

__all__ = ["NotifySendConfig", "NotifySendNotifier", "notify_send_manifest"]
