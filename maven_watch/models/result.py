"""Models for parsed test run results."""

from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True, kw_only=True)
class SuiteCounts:
    """Test counts from a ``Tests run:`` summary line."""

    total: int
    failures: int
    errors: int
    skipped: int

    @property
    def passed(self) -> int:
        """Tests that neither failed, errored nor were skipped.

        Not clamped: a negative value means the summary line was inconsistent.
        """
        return self.total - self.failures - self.errors - self.skipped


@dataclass(frozen=True, kw_only=True)
class RunSummary:
    """Everything extracted from the captured output of one run."""

    success: bool = True
    counts: SuiteCounts | None = None
    failure_names: Sequence[str] = field(default_factory=tuple)
    total_time: str | None = None
    compile_error: bool = False
    raw_output: str = ""
