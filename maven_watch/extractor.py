"""Structured extraction of results from the full output of a Maven run."""

import re
from collections.abc import Sequence

from maven_watch.models.result import RunSummary, SuiteCounts

TOTAL_TIME_PATTERN = re.compile(r"Total time: ([sm\d.]+)", re.IGNORECASE)
AGGREGATE_COUNTS_PATTERN = re.compile(
    r"Tests run: (\d+), Failures: (\d+), Errors: (\d+), Skipped: (\d+)\n(?:\n|\Z)"
)
FAILED_TESTS_PATTERN = re.compile(
    r"Failed tests:(.*?)\n\nTests run", re.IGNORECASE | re.DOTALL
)
COMPILATION_ERROR_MARKER = "COMPILATION ERROR"


def extract_total_time(output: str) -> str | None:
    """Return the token following the first ``Total time:``, verbatim.

    The token is made of digits, dots and the unit letters ``s``/``m``
    (e.g. ``12.345s``).
    """
    if (match := TOTAL_TIME_PATTERN.search(output)) is None:
        return None
    return match.group(1)


def extract_aggregate_counts(output: str) -> SuiteCounts | None:
    """Return the counts of the final aggregate ``Tests run:`` line.

    The aggregate line is the first ``Tests run:`` line followed directly by a
    blank line; per-suite lines carry a ``Time elapsed`` suffix and never match.
    A blank line ending the output leaves only a trailing newline once the
    captured lines are joined, so the end of the text also counts.
    """
    if (match := AGGREGATE_COUNTS_PATTERN.search(output)) is None:
        return None
    total, failures, errors, skipped = (int(group) for group in match.groups())
    return SuiteCounts(total=total, failures=failures, errors=errors, skipped=skipped)


def extract_failure_names(output: str) -> Sequence[str]:
    """Return the entries of the ``Failed tests:`` block.

    The block runs from the marker up to the first blank line followed by
    ``Tests run``. Entries keep their indentation; empty entries are dropped.
    """
    if (match := FAILED_TESTS_PATTERN.search(output)) is None:
        return ()
    return tuple(entry for entry in match.group(1).split("\n") if entry.strip())


def has_compilation_error(output: str) -> bool:
    """Check for the ``COMPILATION ERROR`` marker anywhere in the output."""
    return COMPILATION_ERROR_MARKER in output


def extract_summary(output: str) -> RunSummary:
    """Parse the captured output of a run into a summary.

    Success only reflects what the output says; the caller still has to
    combine it with the exit status of the process.
    """
    success = True
    counts = extract_aggregate_counts(output)
    failure_names: Sequence[str] = ()

    if counts is not None:
        failure_names = extract_failure_names(output)
        if counts.errors + counts.failures > 0:
            success = False

    compile_error = has_compilation_error(output)
    if compile_error:
        success = False

    return RunSummary(
        success=success,
        counts=counts,
        failure_names=failure_names,
        total_time=extract_total_time(output),
        compile_error=compile_error,
        raw_output=output,
    )
