"""Notification payloads summarizing a run."""

from dataclasses import dataclass
from typing import Literal

from maven_watch.models.result import RunSummary, SuiteCounts

TITLE = "Maven Tests"
NO_TESTS_MESSAGE = "Maven Test Results:\nNo Tests Run"


@dataclass(frozen=True, kw_only=True)
class Notification:
    """Payload handed to a notifier."""

    title: str
    message: str
    image: Literal["success", "failed"]
    name: str = ""


def format_counts_message(counts: SuiteCounts, total_time: str | None) -> str:
    message = f"{counts.total} tests"
    if counts.skipped > 0:
        message += f" ({counts.skipped} skipped)"
    message += f"\n{counts.failures} failures, {counts.errors} errors"
    if total_time:
        message += f"\n\nFinished in {total_time}"
    return message


def build_notification(
    summary: RunSummary, success: bool, name: str = ""
) -> Notification:
    """Build the notification for a finished run."""
    if summary.counts is None:
        message = NO_TESTS_MESSAGE
    else:
        message = format_counts_message(summary.counts, summary.total_time)

    return Notification(
        title=TITLE,
        message=message,
        image="success" if success else "failed",
        name=name,
    )
