from managing_events.stores.interfaces import EventStore
from managing_events.stores.memory_store import InMemoryEventStore

__all__ = ["EventStore", "InMemoryEventStore"]
