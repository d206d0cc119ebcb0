"""Watch session reacting to start and change events."""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from maven_watch.controller import RunController, RunOutcome
from maven_watch.models.mode import FullRun
from maven_watch.trigger import resolve_mode

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class MavenWatch:
    """Entry points a file watcher calls; runs are executed one at a time."""

    controller: RunController
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)

    async def start(self) -> RunOutcome | None:
        """Called once when watching starts."""
        if self.controller.config.all_on_start:
            return await self.run_all()
        return None

    async def run_all(self) -> RunOutcome:
        async with self._lock:
            return await self.controller.invoke(FullRun())

    async def run_on_modifications(self, paths: Sequence[str]) -> RunOutcome | None:
        """Run whatever the changed paths call for.

        Args:
            paths: Changed file paths or the keywords ``all`` / ``compile``

        Returns:
            The run outcome, or None when no path maps to a test

        """
        if (mode := resolve_mode(paths)) is None:
            log.info("No tests to run for changed paths: %s", ", ".join(paths))
            return None
        async with self._lock:
            return await self.controller.invoke(mode)
