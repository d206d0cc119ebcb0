"""Run controller driving one Maven invocation from launch to notification."""

import asyncio
import logging
import sys
from asyncio import StreamReader
from contextlib import suppress
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TextIO, cast

from maven_watch.classifier import LiveClassifier
from maven_watch.extractor import extract_summary
from maven_watch.invocation import InvocationSpec, build_invocation
from maven_watch.models.config import WatchConfig
from maven_watch.models.mode import RunMode
from maven_watch.models.result import RunSummary
from maven_watch.notification import Notification, build_notification
from maven_watch.notifiers.base import Notifier
from maven_watch.streaming import DecodedCharReader, LineAccumulator

log = logging.getLogger(__name__)


class RunPhase(StrEnum):
    """Phases of a single run cycle."""

    IDLE = "idle"
    BUILDING = "building"
    RUNNING = "running"
    COLLECTING = "collecting"
    REPORTING = "reporting"


@dataclass(kw_only=True)
class RunState:
    """Mutable state owned by the active run and discarded when it ends."""

    invocation: InvocationSpec
    phase: RunPhase = RunPhase.IDLE
    lines: list[str] = field(default_factory=list)
    exit_code: int | None = None

    def advance(self, phase: RunPhase) -> None:
        log.debug("Run phase: %s -> %s", self.phase, phase)
        self.phase = phase

    @property
    def output(self) -> str:
        return "\n".join(self.lines)


@dataclass(frozen=True, kw_only=True)
class RunOutcome:
    """Result of one run as reported to the user."""

    success: bool
    summary: RunSummary
    invocation: InvocationSpec
    notification: Notification
    exit_code: int | None


@dataclass(frozen=True, kw_only=True)
class RunController:
    """Runs Maven for a mode, streams its output and reports the result.

    A run never raises for problems with the external process: spawn
    failures, timeouts and read errors turn into a failed outcome built from
    whatever output was captured.
    """

    config: WatchConfig
    notifier: Notifier
    console: TextIO = field(default_factory=lambda: sys.stdout)

    async def invoke(self, mode: RunMode) -> RunOutcome:
        """Execute a single run cycle.

        Args:
            mode: Full run, compile-only or targeted tests

        Returns:
            The overall outcome, after the notification has been handed off

        """
        invocation = build_invocation(mode, self.config)
        state = RunState(invocation=invocation)
        state.advance(RunPhase.BUILDING)

        # start with a newline to get past the prompt
        print(file=self.console)
        print(invocation.banner, file=self.console)
        print(invocation.command_line, file=self.console, flush=True)
        log.info("Running: %s", invocation.command_line)

        state.advance(RunPhase.RUNNING)
        await self._execute(state)

        state.advance(RunPhase.COLLECTING)
        summary = extract_summary(state.output)
        success = state.exit_code == 0 and summary.success
        log.info(
            "Run finished: exit_code=%s success=%s compile_error=%s",
            state.exit_code,
            success,
            summary.compile_error,
        )

        if not self.config.verbose:
            self._print_details(summary)

        state.advance(RunPhase.REPORTING)
        notification = build_notification(summary, success, invocation.run_name)
        await self._notify(notification)

        state.advance(RunPhase.IDLE)
        return RunOutcome(
            success=success,
            summary=summary,
            invocation=invocation,
            notification=notification,
            exit_code=state.exit_code,
        )

    async def _execute(self, state: RunState) -> None:
        """Spawn the process and collect its output into the run state."""
        command = state.invocation.command
        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
                cwd=self.config.working_dir,
            )
        except OSError as exc:
            log.error("Failed to start %s: %s", command[0], exc)
            return

        stdout = cast(StreamReader, process.stdout)
        try:
            async with asyncio.timeout(self.config.timeout):
                await self._consume(stdout, state)
                state.exit_code = await process.wait()
        except TimeoutError:
            log.error("Run did not complete within %s seconds", self.config.timeout)
        except OSError as exc:
            log.error("Reading output of %s failed: %s", command[0], exc, exc_info=exc)
        finally:
            if process.returncode is None:
                with suppress(ProcessLookupError):
                    process.kill()
                await process.wait()

    async def _consume(self, stream: StreamReader, state: RunState) -> None:
        """Read the output character by character, echoing as configured."""
        accumulator = LineAccumulator()
        classifier = LiveClassifier(console=self.console)
        verbose = self.config.verbose

        async for char in DecodedCharReader(stream):
            if verbose:
                self.console.write(char)
                self.console.flush()
            if (line := accumulator.feed(char)) is None:
                continue
            state.lines.append(line)
            if not verbose:
                classifier.handle(line)

        accumulator.finish()
        self.console.flush()

    def _print_details(self, summary: RunSummary) -> None:
        if summary.failure_names:
            failures = "\n".join(summary.failure_names)
            print(f"Failed Tests:\n{failures}", file=self.console)
        if summary.compile_error:
            print(summary.raw_output, file=self.console)
        self.console.flush()

    async def _notify(self, notification: Notification) -> None:
        try:
            await self.notifier.notify(notification)
        except Exception as exc:
            log.error("Notification failed: %s", exc, exc_info=exc)
