"""Domain models for the event registry.

Event and EventSpeaker are immutable. EventLocation is the one mutable
entity: its capacity shrinks as tickets are sold, and every Event that
references the location sees the change.
"""

from dataclasses import dataclass, field
from datetime import datetime

from managing_events.domain.value_objects import Capacity, Money


@dataclass(eq=False)
class EventLocation:
    """Venue hosting one or more events.

    Compared by identity.
    """

    venue: str
    address: str
    capacity: int = 0
    reserved: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        Capacity(self.capacity)

    def reserve(self, quantity: int) -> None:
        """Take ``quantity`` seats, leaving capacity untouched on failure.

        Raises:
            ValueError: If fewer than ``quantity`` seats remain.
        """
        Capacity(quantity)
        self.capacity = Capacity(self.capacity).reserve(quantity).value
        self.reserved += quantity

    def release(self, quantity: int) -> None:
        """Give back seats taken by ``reserve``.

        Raises:
            ValueError: If more seats are released than were reserved.
        """
        Capacity(quantity)
        self.reserved = Capacity(self.reserved).reserve(quantity).value
        self.capacity += quantity


@dataclass(frozen=True)
class EventSpeaker:
    """Domain representation of a speaker."""

    name: str
    bio: str
    topic: str


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    title: str
    date: datetime
    location: EventLocation
    speakers: tuple[EventSpeaker, ...] = field(default_factory=tuple)
    ticket_price: Money = field(default_factory=lambda: Money(amount=0))

    def __post_init__(self) -> None:
        # Freeze whatever sequence the caller handed us, keeping order.
        object.__setattr__(self, "speakers", tuple(self.speakers))
        if not isinstance(self.ticket_price, Money):
            object.__setattr__(self, "ticket_price", Money(self.ticket_price))

    @property
    def is_sold_out(self) -> bool:
        return self.location.capacity == 0

    def duration_in_hours(self, end_time: datetime) -> float:
        """Hours between the event start and ``end_time``."""
        return (end_time - self.date).total_seconds() / 3600
