"""Loading of notifiers from entry points."""

import logging
from importlib.metadata import entry_points
from typing import Any

from maven_watch.notifiers.manifest import NotifierManifest

log = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "maven_watch.notifiers"


class NotifierNotFoundError(Exception):
    """Raised when no usable notifier is registered under a key."""


def load_notifier_manifest(key: str) -> NotifierManifest[Any]:
    """Load a notifier manifest by key.

    Args:
        key: The notifier key as registered in pyproject.toml
             (e.g., "console", "notify-send")

    Returns:
        The notifier manifest instance

    Raises:
        NotifierNotFoundError: If no notifier is registered under the key, or
            the entry point does not resolve to a manifest

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)
    matches = entries.select(name=key)

    if not matches:
        available = sorted(entries.names)
        raise NotifierNotFoundError(
            f"Notifier '{key}' not found. Available notifiers: {available}"
        )

    entry = next(iter(matches))
    manifest = entry.load()
    if not isinstance(manifest, NotifierManifest):
        raise NotifierNotFoundError(
            f"Entry point '{key}' ({entry.value}) is not a notifier manifest"
        )

    log.debug("Loaded notifier %s from %s", key, entry.value)
    return manifest
