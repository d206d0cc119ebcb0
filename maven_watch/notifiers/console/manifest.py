"""Console notifier manifest."""

from maven_watch.notifiers.console.config import ConsoleConfig
from maven_watch.notifiers.console.notifier import ConsoleNotifier
from maven_watch.notifiers.manifest import NotifierManifest

console_manifest = NotifierManifest(
    config_cls=ConsoleConfig,
    notifier_factory=ConsoleNotifier.from_config,
)
