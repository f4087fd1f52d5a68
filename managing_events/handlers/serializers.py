"""Serializers between primitive data and domain models.

EventSerializer validates incoming data and ``save()`` builds a domain Event.
Passing an Event instance renders it back to primitives.
"""

from rest_framework import serializers

from managing_events.domain import Event, EventLocation, EventSpeaker, Money


class EventLocationSerializer(serializers.Serializer):
    """Serializer for EventLocation domain model."""

    venue = serializers.CharField(max_length=255)
    address = serializers.CharField(max_length=255)
    capacity = serializers.IntegerField(min_value=0)

    def create(self, validated_data) -> EventLocation:
        return EventLocation(**validated_data)


class EventSpeakerSerializer(serializers.Serializer):
    """Serializer for EventSpeaker domain model."""

    name = serializers.CharField(max_length=255)
    bio = serializers.CharField(allow_blank=True)
    topic = serializers.CharField(max_length=255)

    def create(self, validated_data) -> EventSpeaker:
        return EventSpeaker(**validated_data)


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    title = serializers.CharField(max_length=255)
    date = serializers.DateTimeField()
    location = EventLocationSerializer()
    speakers = EventSpeakerSerializer(many=True)
    ticket_price = serializers.DecimalField(
        source="ticket_price.amount",
        max_digits=10,
        decimal_places=2,
        min_value=0,
    )

    def create(self, validated_data) -> Event:
        return Event(
            title=validated_data["title"],
            date=validated_data["date"],
            location=EventLocationSerializer().create(validated_data["location"]),
            speakers=[EventSpeakerSerializer().create(speaker) for speaker in validated_data["speakers"]],
            ticket_price=Money(amount=validated_data["ticket_price"]["amount"]),
        )
