"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from managing_events.domain import Event


class EventStore(ABC):
    """Interface for registered-event storage."""

    @abstractmethod
    def add(self, event: Event) -> None:
        """Append an event; duplicates are kept."""
        ...

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events in registration order."""
        ...

    @abstractmethod
    def count(self) -> int:
        ...
