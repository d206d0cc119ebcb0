"""Tests for notifier loading module."""

import logging
from importlib.metadata import EntryPoint, EntryPoints
from unittest.mock import patch

import pytest

from maven_watch.notifiers.console import console_manifest
from maven_watch.notifiers.loading import (
    ENTRY_POINT_GROUP,
    NotifierNotFoundError,
    load_notifier_manifest,
)
from maven_watch.notifiers.notify_send import notify_send_manifest


@pytest.mark.parametrize(
    ("key", "manifest"),
    [("console", console_manifest), ("notify-send", notify_send_manifest)],
)
def test_load_notifier_manifest_returns_manifest(key: str, manifest: object) -> None:
    """Loads notifier manifest by key."""
    assert load_notifier_manifest(key) is manifest


def test_load_notifier_manifest_logs_entry_point(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Logs which entry point a notifier was loaded from."""
    with caplog.at_level(logging.DEBUG, logger="maven_watch.notifiers.loading"):
        load_notifier_manifest("console")

    assert (
        "Loaded notifier console from maven_watch.notifiers.console:console_manifest"
        in caplog.text
    )


def test_load_notifier_manifest_raises_for_unknown_notifier() -> None:
    """Raises NotifierNotFoundError listing the registered keys in order."""
    with pytest.raises(NotifierNotFoundError) as exc_info:
        load_notifier_manifest("unknown-notifier")

    assert "unknown-notifier" in str(exc_info.value)
    assert "Available notifiers: ['console', 'notify-send']" in str(exc_info.value)


def test_load_notifier_manifest_rejects_non_manifest() -> None:
    """Raises NotifierNotFoundError when the entry point is not a manifest."""
    entries = EntryPoints(
        (
            EntryPoint(
                name="broken",
                value="maven_watch.notifiers.loading:ENTRY_POINT_GROUP",
                group=ENTRY_POINT_GROUP,
            ),
        )
    )

    with (
        patch("maven_watch.notifiers.loading.entry_points", return_value=entries),
        pytest.raises(NotifierNotFoundError, match="is not a notifier manifest"),
    ):
        load_notifier_manifest("broken")
