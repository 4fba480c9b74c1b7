"""Infrastructure service interfaces to decouple the notifier from concrete implementations."""

from abc import ABC, abstractmethod
from typing import Sequence

from app.domain.aggregates.scheduled_event import ScheduledEvent


class IEventSource(ABC):
    """Read side of the reminder store, as seen by the notifier."""

    @abstractmethod
    def fetch_events(self) -> Sequence[ScheduledEvent]:
        """Return every stored reminder joined with its pet and owner.

        Blocking; raises when the store is unreachable.
        """


class INotificationDispatcher(ABC):
    """Interface for reminder delivery."""

    @abstractmethod
    async def send(self, recipient_email: str, subject: str, body: str) -> None:
        """Deliver one message; raise on failure."""
