"""Static configuration for a watch session."""

from pathlib import Path

from pydantic import Field

from maven_watch.models.base import Model


class WatchConfig(Model):
    """Configuration shared by every run of a watch session."""

    command: str = Field(
        default="mvn",
        min_length=1,
        description="Build tool command in shell syntax (e.g. 'mvn', './mvnw -q')",
    )
    extra_args: str | None = Field(
        default=None,
        description="Extra arguments appended to every invocation (shell syntax)",
    )
    verbose: bool = Field(
        default=False, description="Echo raw build output instead of progress rows"
    )
    all_on_start: bool = Field(
        default=False, description="Run every test when the session starts"
    )
    timeout: float | None = Field(
        default=None, gt=0, description="Seconds before a run is killed"
    )
    working_dir: Path | None = Field(
        default=None, description="Directory the build tool runs in"
    )
