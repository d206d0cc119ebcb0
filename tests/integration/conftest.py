"""Fixtures for integration tests."""

import json
import shlex
import sys
from pathlib import Path
from typing import Protocol

import pytest

FAKE_MAVEN_SCRIPT = """\
import json
import os
import sys
import time
from pathlib import Path

here = Path(__file__).parent
(here / "cwd.txt").write_text(os.getcwd())
(here / "argv.json").write_text(json.dumps(sys.argv[1:]))
sys.stdout.buffer.write((here / "stdout.bin").read_bytes())
sys.stdout.buffer.flush()
sys.stderr.buffer.write((here / "stderr.bin").read_bytes())
sys.stderr.buffer.flush()
time.sleep({sleep})
sys.exit({exit_code})
"""


class FakeMavenFn(Protocol):
    """Protocol for fake Maven creation function."""

    def __call__(
        self,
        stdout: bytes | str,
        *,
        exit_code: int = 0,
        stderr: bytes = b"",
        sleep: float = 0,
    ) -> str:
        """Create a fake Maven command and return its command line."""


class RecordedArgsFn(Protocol):
    """Protocol for reading the arguments the fake Maven received."""

    def __call__(self) -> list[str]:
        """Return the recorded arguments."""


@pytest.fixture
def fake_maven_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "fake-maven"
    directory.mkdir()
    return directory


@pytest.fixture
def fake_maven(fake_maven_dir: Path) -> FakeMavenFn:
    """Return a function creating a script that behaves like a Maven run."""

    def _create(
        stdout: bytes | str,
        *,
        exit_code: int = 0,
        stderr: bytes = b"",
        sleep: float = 0,
    ) -> str:
        if isinstance(stdout, str):
            stdout = stdout.encode()
        (fake_maven_dir / "stdout.bin").write_bytes(stdout)
        (fake_maven_dir / "stderr.bin").write_bytes(stderr)
        script = fake_maven_dir / "mvn.py"
        script.write_text(FAKE_MAVEN_SCRIPT.format(sleep=sleep, exit_code=exit_code))
        return shlex.join([sys.executable, str(script)])

    return _create


@pytest.fixture
def recorded_args(fake_maven_dir: Path) -> RecordedArgsFn:
    """Return a function reading the arguments passed to the fake Maven."""

    def _read() -> list[str]:
        args: list[str] = json.loads((fake_maven_dir / "argv.json").read_text())
        return args

    return _read
