"""Human-readable rendering of events."""

from managing_events.domain import Event


def to_detailed_string(event: Event) -> str:
    speakers = ", ".join(speaker.name for speaker in event.speakers)
    return "\n".join(
        [
            f"Event: {event.title},",
            f"Date: {event.date:%Y-%m-%d %H:%M},",
            f"Venue: {event.location.venue},",
            f"Speakers: {speakers},",
            f"Price: ${event.ticket_price}",
        ]
    )
