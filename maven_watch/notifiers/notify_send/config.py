"""Configuration for the notify-send notifier."""

from pydantic import BaseModel, Field


class NotifySendConfig(BaseModel):
    """Configuration for the notify-send notifier."""

    executable: str = "notify-send"
    app_name: str = "maven-watch"
    success_icon: str = "dialog-information"
    failed_icon: str = "dialog-error"
    expire_time_ms: int | None = Field(default=None, ge=0)
