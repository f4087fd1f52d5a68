"""Reference configuration for an EventManager."""

from managing_events.services.event_manager import EventManager
from managing_events.services.pricing import TieredPriceCalculator
from managing_events.services.validation import DEFAULT_RULES


def setup_event_manager(manager: EventManager) -> EventManager:
    """Install the default validation rules and the tiered price calculator.

    Pricing factors come from the MANAGING_EVENTS setting. Returns the
    manager so construction can be chained.
    """
    for rule in DEFAULT_RULES:
        manager.add_validation_rule(rule)
    manager.set_price_calculator(TieredPriceCalculator.from_settings())
    return manager
