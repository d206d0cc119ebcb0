"""Abstract base class for notification sinks."""

from abc import ABC, abstractmethod

from maven_watch.notification import Notification


class Notifier(ABC):
    """Delivers run notifications somewhere the user will see them.

    Delivery is fire-and-forget: callers do not consume a result, and
    implementations should log rather than raise on delivery problems.
    """

    @abstractmethod
    async def notify(self, notification: Notification) -> None:
        """Deliver a notification.

        Args:
            notification: Title, message and image tag of a finished run

        """
