"""CLI entry point for the Maven watch runner."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from maven_watch.controller import RunController, RunOutcome
from maven_watch.models.config import WatchConfig
from maven_watch.notifiers.loading import load_notifier_manifest
from maven_watch.watch import MavenWatch

STATUS_SYMBOLS = {
    True: "✓",
    False: "✗",
}


def log_outcomes_summary(log: logging.Logger, outcomes: Sequence[RunOutcome]) -> None:
    """Log a one-line result per run."""
    for outcome in outcomes:
        counts = outcome.summary.counts
        log.info(
            "%s %s: %s",
            STATUS_SYMBOLS[outcome.success],
            outcome.invocation.command_line,
            "no tests run"
            if counts is None
            else (
                f"{counts.total} run, {counts.passed} passed, {counts.failures} "
                f"failed, {counts.errors} errors, {counts.skipped} skipped"
            ),
        )


async def run(
    config: WatchConfig,
    notifier_key: str,
    notifier_config_json: str,
    paths: Sequence[str] = (),
) -> int:
    """Run the start hook and the given change set, returning the exit code."""
    log = logging.getLogger("maven_watch")

    log.info("Loading notifier: %s", notifier_key)
    manifest = load_notifier_manifest(notifier_key)
    notifier_config = manifest.config_cls(**json.loads(notifier_config_json))

    outcomes: list[RunOutcome] = []
    async with manifest.notifier_factory(notifier_config) as notifier:
        watch = MavenWatch(controller=RunController(config=config, notifier=notifier))

        if (outcome := await watch.start()) is not None:
            outcomes.append(outcome)

        if paths:
            if (outcome := await watch.run_on_modifications(paths)) is not None:
                outcomes.append(outcome)
        elif not outcomes:
            outcomes.append(await watch.run_all())

    log_outcomes_summary(log, outcomes)
    return 0 if all(outcome.success for outcome in outcomes) else 1


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run Maven tests for changed files and notify the result"
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Changed paths or test names; 'all' runs everything, 'compile' compiles",
    )
    parser.add_argument("--command", default="mvn", help="Maven executable")
    parser.add_argument(
        "--args",
        dest="extra_args",
        default=None,
        help="Extra arguments appended to every Maven invocation",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Echo Maven output as-is instead of progress rows",
    )
    parser.add_argument(
        "--all-on-start",
        action="store_true",
        help="Run all tests before handling the given paths",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds after which a run is killed",
    )
    parser.add_argument(
        "--working-dir",
        type=Path,
        default=None,
        help="Directory to run Maven in",
    )
    parser.add_argument(
        "--notifier",
        default="console",
        help="Notifier key (console, notify-send)",
    )
    parser.add_argument(
        "--notifier-config",
        default="{}",
        help="JSON configuration for the notifier",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    config = WatchConfig(
        command=args.command,
        extra_args=args.extra_args,
        verbose=args.verbose,
        all_on_start=args.all_on_start,
        timeout=args.timeout,
        working_dir=args.working_dir,
    )

    exit_code = asyncio.run(
        run(
            config=config,
            notifier_key=args.notifier,
            notifier_config_json=args.notifier_config,
            paths=args.paths,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
