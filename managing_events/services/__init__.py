from managing_events.services.defaults import setup_event_manager
from managing_events.services.event_manager import EventManager
from managing_events.services.pricing import PriceCalculator, TieredPriceCalculator
from managing_events.services.validation import (
    DEFAULT_RULES,
    ValidationRule,
    date_in_future,
    has_positive_price,
    has_speakers,
)

__all__ = [
    "EventManager",
    "setup_event_manager",
    "PriceCalculator",
    "TieredPriceCalculator",
    "ValidationRule",
    "DEFAULT_RULES",
    "date_in_future",
    "has_positive_price",
    "has_speakers",
]
