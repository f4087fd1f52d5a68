"""Event registry - all business logic lives here.

The EventManager:
- Validates events against its rules before registering them
- Notifies subscribers synchronously after each registration
- Sells tickets against the shared location capacity
- Delegates pricing to a replaceable calculator

Not thread-safe: add_event and purchase_tickets are check-then-act.
"""

import logging
from decimal import Decimal

from managing_events.domain import (
    Event,
    InsufficientCapacityError,
    InvalidQuantityError,
    NotConfiguredError,
    ValidationError,
)
from managing_events.services.pricing import PriceCalculator
from managing_events.services.validation import ValidationRule, failed_rules, rule_name
from managing_events.signals import EventAddedSignal, EventHandler
from managing_events.stores import EventStore, InMemoryEventStore

logger = logging.getLogger(__name__)


class EventManager:
    """Registry of events with validation, notification and ticket sales."""

    def __init__(self, store: EventStore | None = None) -> None:
        self._store = store if store is not None else InMemoryEventStore()
        self._validation_rules: list[ValidationRule] = []
        self._price_calculator: PriceCalculator | None = None
        self.event_added = EventAddedSignal()

    def add_event(self, event: Event) -> None:
        """Validate and register an event, then notify subscribers.

        Subscriber failures are logged and do not undo the registration.

        Raises:
            ValidationError: If the event fails any validation rule.
        """
        failures = failed_rules(event, self._validation_rules)
        if failures:
            logger.warning("Rejected event %r: failed %s", event.title, ", ".join(failures))
            raise ValidationError(event.title, failures)

        self._store.add(event)
        logger.info("Registered event %r (%d total)", event.title, self._store.count())
        self.event_added.notify(
            sender=self,
            event=event,
            message=f'Successfully added event "{event.title}" ',
        )

    def add_validation_rule(self, rule: ValidationRule) -> None:
        if not callable(rule):
            raise TypeError(f"Validation rule must be callable, got {rule!r}")
        self._validation_rules.append(rule)
        logger.debug("Added validation rule %s", rule_name(rule))

    def set_price_calculator(self, calculator: PriceCalculator) -> None:
        if not callable(calculator):
            raise TypeError(f"Price calculator must be callable, got {calculator!r}")
        self._price_calculator = calculator
        logger.debug("Price calculator set to %r", calculator)

    @property
    def validation_rules(self) -> tuple[ValidationRule, ...]:
        return tuple(self._validation_rules)

    @property
    def price_calculator(self) -> PriceCalculator | None:
        return self._price_calculator

    def list_events(self) -> tuple[Event, ...]:
        """Return all registered events in registration order."""
        return tuple(self._store.list_events())

    def purchase_tickets(self, event: Event, quantity: int) -> Decimal:
        """Sell ``quantity`` tickets for ``event`` and return the total price.

        Capacity is only reduced when the whole purchase succeeds.

        Raises:
            InvalidQuantityError: If quantity is not a positive integer.
            NotConfiguredError: If no price calculator has been set.
            InsufficientCapacityError: If the venue has fewer seats left.
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise InvalidQuantityError(quantity)
        if self._price_calculator is None:
            raise NotConfiguredError()

        location = event.location
        try:
            location.reserve(quantity)
        except ValueError:
            logger.warning(
                "Cannot sell %d tickets for %r: %d left",
                quantity,
                event.title,
                location.capacity,
            )
            raise InsufficientCapacityError(quantity, location.capacity) from None

        try:
            total = self._price_calculator(event, quantity)
            if isinstance(total, float):
                total = Decimal(str(total))
            elif not isinstance(total, Decimal):
                total = Decimal(total)
        except Exception:
            location.release(quantity)
            raise

        logger.info(
            "Sold %d tickets for %r at %s (%d left)",
            quantity,
            event.title,
            total,
            location.capacity,
        )
        return total

    def subscribe(self, handler: EventHandler) -> None:
        self.event_added.subscribe(handler)

    def unsubscribe(self, handler: EventHandler) -> bool:
        return self.event_added.unsubscribe(handler)
