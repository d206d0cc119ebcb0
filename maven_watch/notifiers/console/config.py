"""Configuration for the console notifier."""

from typing import Literal

from pydantic import BaseModel


class ConsoleConfig(BaseModel):
    """Configuration for the console notifier."""

    logger_name: str = "maven_watch.notifications"
    failure_level: Literal["WARNING", "ERROR"] = "ERROR"
