"""Run modes selecting what a single run invokes."""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class FullRun:
    """Run every test in the project."""


@dataclass(frozen=True, kw_only=True)
class CompileOnly:
    """Compile the project without running tests."""


@dataclass(frozen=True, kw_only=True)
class TargetedTests:
    """Run only the given test identifiers, in order."""

    test_ids: Sequence[str]

    def __post_init__(self) -> None:
        if not self.test_ids:
            raise ValueError("TargetedTests requires at least one test identifier")


RunMode = FullRun | CompileOnly | TargetedTests
