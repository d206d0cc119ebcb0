"""Live classification of build output lines into progress rows."""

import re
import sys
from dataclasses import dataclass, field
from typing import TextIO

from maven_watch.models.result import SuiteCounts

SUITE_SUMMARY_PATTERN = re.compile(
    r"Tests run: (\d+), Failures: (\d+), Errors: (\d+), Skipped: (\d+), Time elapsed:"
)


def parse_suite_counts(line: str) -> SuiteCounts | None:
    """Parse a per-suite ``Tests run: ..., Time elapsed:`` line."""
    if (match := SUITE_SUMMARY_PATTERN.search(line)) is None:
        return None
    total, failures, errors, skipped = (int(group) for group in match.groups())
    return SuiteCounts(total=total, failures=failures, errors=errors, skipped=skipped)


def render_progress(counts: SuiteCounts) -> str:
    """Render counts as dots, then E's, F's and S's."""
    return (
        "." * counts.passed
        + "E" * counts.errors
        + "F" * counts.failures
        + "S" * counts.skipped
    )


def classify_line(line: str) -> str | None:
    """Decide what, if anything, to print for a completed output line.

    Returns:
        The text to print (without line break), or None to print nothing.

    """
    if line.startswith("Running"):
        return line
    if (counts := parse_suite_counts(line)) is not None:
        return render_progress(counts)
    return None


@dataclass(frozen=True, kw_only=True)
class LiveClassifier:
    """Prints the classified form of each line to the console."""

    console: TextIO = field(default_factory=lambda: sys.stdout)

    def handle(self, line: str) -> None:
        if (text := classify_line(line)) is not None:
            print(text, file=self.console, flush=True)
