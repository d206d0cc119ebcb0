"""Tests for the console notifier."""

import logging

import pytest

from maven_watch.notification import Notification
from maven_watch.notifiers.console import (
    ConsoleConfig,
    ConsoleNotifier,
    console_manifest,
)


async def test_logs_success_at_info(caplog: pytest.LogCaptureFixture) -> None:
    """Successful runs are logged at INFO with the message on one line."""
    notification = Notification(
        title="Maven Tests",
        message="5 tests\n0 failures, 0 errors\n\nFinished in 2s",
        image="success",
    )

    with caplog.at_level(logging.INFO, logger="maven_watch.notifications"):
        async with console_manifest.notifier_factory(ConsoleConfig()) as notifier:
            await notifier.notify(notification)

    record = caplog.records[-1]
    assert record.levelno == logging.INFO
    assert record.getMessage() == (
        "Maven Tests: 5 tests | 0 failures, 0 errors | Finished in 2s"
    )


async def test_logs_failure_with_run_name(caplog: pytest.LogCaptureFixture) -> None:
    """Failed runs use the configured level and mention the run name."""
    notifier = ConsoleNotifier(config=ConsoleConfig(failure_level="WARNING"))
    notification = Notification(
        title="Maven Tests",
        message="2 tests\n1 failures, 0 errors",
        image="failed",
        name="FooTest\nBarTest",
    )

    with caplog.at_level(logging.INFO, logger="maven_watch.notifications"):
        await notifier.notify(notification)

    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert record.getMessage().startswith("Maven Tests [FooTest, BarTest]: ")
