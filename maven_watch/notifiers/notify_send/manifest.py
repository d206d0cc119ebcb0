"""notify-send notifier manifest."""

from maven_watch.notifiers.manifest import NotifierManifest
from maven_watch.notifiers.notify_send.config import NotifySendConfig
from maven_watch.notifiers.notify_send.notifier import NotifySendNotifier

notify_send_manifest = NotifierManifest(
    config_cls=NotifySendConfig,
    notifier_factory=NotifySendNotifier.from_config,
)
