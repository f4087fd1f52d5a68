"""Tests for serializers and event formatting.

Run with: pytest tests/test_serializers.py -v
"""

from datetime import datetime, timezone
from decimal import Decimal

from managing_events.domain import Event, EventLocation, EventSpeaker, Money
from managing_events.handlers import EventSerializer, to_detailed_string

PAYLOAD = {
    "title": "Data Summit",
    "date": "2031-03-14T09:30:00Z",
    "location": {"venue": "Expo Hall", "address": "1 Fair Rd", "capacity": 250},
    "speakers": [
        {"name": "Ada", "bio": "Pioneer", "topic": "Engines"},
        {"name": "Grace", "bio": "", "topic": "Compilers"},
    ],
    "ticket_price": "49.50",
}


class TestEventSerializer:
    """Tests for building and rendering Event domain models."""

    def test_save_builds_domain_event(self):
        serializer = EventSerializer(data=PAYLOAD)
        assert serializer.is_valid(), serializer.errors
        event = serializer.save()

        assert isinstance(event, Event)
        assert event.title == "Data Summit"
        assert event.date == datetime(2031, 3, 14, 9, 30, tzinfo=timezone.utc)
        assert isinstance(event.location, EventLocation)
        assert event.location.capacity == 250
        assert [speaker.name for speaker in event.speakers] == ["Ada", "Grace"]
        assert event.ticket_price == Money(Decimal("49.50"))

    def test_negative_price_is_invalid(self):
        serializer = EventSerializer(data={**PAYLOAD, "ticket_price": "-1.00"})
        assert not serializer.is_valid()
        assert "ticket_price" in serializer.errors

    def test_negative_capacity_is_invalid(self):
        location = {**PAYLOAD["location"], "capacity": -1}
        serializer = EventSerializer(data={**PAYLOAD, "location": location})
        assert not serializer.is_valid()
        assert "capacity" in serializer.errors["location"]

    def test_missing_speakers_is_invalid(self):
        data = {key: value for key, value in PAYLOAD.items() if key != "speakers"}
        serializer = EventSerializer(data=data)
        assert not serializer.is_valid()
        assert "speakers" in serializer.errors

    def test_renders_event(self, event):
        data = EventSerializer(event).data
        assert data["title"] == "C# Workshop"
        assert data["location"] == {"venue": "Tech Hub", "address": "123 Main St", "capacity": 100}
        assert data["speakers"] == [
            {"name": "John Doe", "bio": "Tech Expert", "topic": "C# Modern Features"}
        ]
        assert data["ticket_price"] == "199.99"


class TestDetailedString:
    """Tests for to_detailed_string."""

    def test_includes_event_details(self):
        event = Event(
            title="Data Summit",
            date=datetime(2031, 3, 14, 9, 30, tzinfo=timezone.utc),
            location=EventLocation("Expo Hall", "1 Fair Rd", 250),
            speakers=[EventSpeaker("Ada", "Pioneer", "Engines"), EventSpeaker("Grace", "", "Compilers")],
            ticket_price=Money(Decimal("49.5")),
        )
        assert to_detailed_string(event).splitlines() == [
            "Event: Data Summit,",
            "Date: 2031-03-14 09:30,",
            "Venue: Expo Hall,",
            "Speakers: Ada, Grace,",
            "Price: $49.50",
        ]
