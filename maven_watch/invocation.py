"""Building the Maven command line for a run mode."""

import shlex
from collections.abc import Sequence
from dataclasses import dataclass

from maven_watch.models.config import WatchConfig
from maven_watch.models.mode import CompileOnly, FullRun, RunMode, TargetedTests

NO_TESTS_FLAG = "-DfailIfNoTests=false"


@dataclass(frozen=True, kw_only=True)
class InvocationSpec:
    """Command tokens and display details for one run."""

    command: Sequence[str]
    run_name: str = ""
    banner: str = ""

    @property
    def command_line(self) -> str:
        return shlex.join(self.command)


def build_invocation(mode: RunMode, config: WatchConfig) -> InvocationSpec:
    """Build the command line for a run.

    Args:
        mode: What the run should do
        config: Session configuration providing the executable and extra args

    Returns:
        Invocation with extra arguments appended last

    """
    tokens = shlex.split(config.command)
    run_name = ""

    match mode:
        case CompileOnly():
            tokens.append("compile")
            banner = "Compiling..."
        case TargetedTests(test_ids=test_ids):
            tokens += ["test", NO_TESTS_FLAG, f"-Dtest={','.join(test_ids)}"]
            run_name = "\n".join(test_ids)
            banner = f"Preparing tests for {', '.join(test_ids)}..."
        case FullRun():
            tokens += ["test", NO_TESTS_FLAG]
            banner = "Preparing all tests..."

    if config.extra_args:
        tokens += shlex.split(config.extra_args)

    return InvocationSpec(command=tuple(tokens), run_name=run_name, banner=banner)
