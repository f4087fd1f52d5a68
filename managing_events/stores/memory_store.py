"""In-process implementation of the EventStore."""

from managing_events.domain import Event
from managing_events.stores.interfaces import EventStore


class InMemoryEventStore(EventStore):
    """Append-only event list living as long as the process."""

    def __init__(self) -> None:
        self._events: list[Event] = []

    def add(self, event: Event) -> None:
        self._events.append(event)

    def list_events(self) -> list[Event]:
        return list(self._events)

    def count(self) -> int:
        return len(self._events)
