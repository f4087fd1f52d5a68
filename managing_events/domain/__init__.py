from managing_events.domain.errors import (
    DomainError,
    ErrorCode,
    InsufficientCapacityError,
    InvalidQuantityError,
    NotConfiguredError,
    ValidationError,
)
from managing_events.domain.models import Event, EventLocation, EventSpeaker
from managing_events.domain.value_objects import Capacity, Money

__all__ = [
    "Event",
    "EventLocation",
    "EventSpeaker",
    "Money",
    "Capacity",
    "DomainError",
    "ErrorCode",
    "ValidationError",
    "InsufficientCapacityError",
    "NotConfiguredError",
    "InvalidQuantityError",
]
