"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from managing_events.domain import Event, EventLocation, EventSpeaker, Money
from managing_events.services import EventManager, setup_event_manager


@pytest.fixture
def location() -> EventLocation:
    return EventLocation("Tech Hub", "123 Main St", 100)


@pytest.fixture
def speaker() -> EventSpeaker:
    return EventSpeaker("John Doe", "Tech Expert", "C# Modern Features")


@pytest.fixture
def make_event(location: EventLocation, speaker: EventSpeaker) -> Callable[..., Event]:
    """Build events that pass the default rules unless told otherwise."""

    def factory(
        title: str = "C# Workshop",
        days_ahead: int = 30,
        speaker_count: int = 1,
        price: str = "199.99",
        venue: EventLocation | None = None,
    ) -> Event:
        return Event(
            title=title,
            date=timezone.now() + timedelta(days=days_ahead),
            location=venue if venue is not None else location,
            speakers=[speaker] * speaker_count,
            ticket_price=Money(Decimal(price)),
        )

    return factory


@pytest.fixture
def event(make_event: Callable[..., Event]) -> Event:
    return make_event()


@pytest.fixture
def manager() -> EventManager:
    """An EventManager with the default rules and price calculator."""
    return setup_event_manager(EventManager())
