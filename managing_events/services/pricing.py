"""Ticket pricing strategies.

A price calculator is any callable ``(event, quantity) -> Decimal``. The
registry holds exactly one at a time.
"""

from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal
from typing import Self

from managing_events.conf import get_events_settings
from managing_events.domain import Event

PriceCalculator = Callable[[Event, int], Decimal]

ONE = Decimal("1.0")


@dataclass(frozen=True)
class TieredPriceCalculator:
    """Base price times quantity, with a bulk discount and a speaker premium.

    The two factors are independent and multiply together:

        total = price * quantity * bulk_factor * premium_factor

    where the bulk factor applies once ``quantity >= bulk_threshold`` and the
    premium applies once the event has more than ``premium_threshold`` speakers.
    """

    bulk_threshold: int = 5
    bulk_factor: Decimal = Decimal("0.9")
    premium_threshold: int = 3
    premium_factor: Decimal = Decimal("1.2")

    @classmethod
    def from_settings(cls) -> Self:
        conf = get_events_settings()
        return cls(
            bulk_threshold=conf["BULK_DISCOUNT_THRESHOLD"],
            bulk_factor=conf["BULK_DISCOUNT_FACTOR"],
            premium_threshold=conf["SPEAKER_PREMIUM_THRESHOLD"],
            premium_factor=conf["SPEAKER_PREMIUM_FACTOR"],
        )

    def bulk_discount(self, quantity: int) -> Decimal:
        return self.bulk_factor if quantity >= self.bulk_threshold else ONE

    def speaker_premium(self, event: Event) -> Decimal:
        return self.premium_factor if len(event.speakers) > self.premium_threshold else ONE

    def __call__(self, event: Event, quantity: int) -> Decimal:
        base_price = event.ticket_price.amount * quantity
        return base_price * self.bulk_discount(quantity) * self.speaker_premium(event)
