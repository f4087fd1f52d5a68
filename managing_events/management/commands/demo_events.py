"""Walk through registering an event and selling tickets for it."""

from datetime import timedelta

from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from managing_events.domain import DomainError
from managing_events.handlers import EventSerializer, to_detailed_string
from managing_events.services import EventManager, setup_event_manager

SAMPLE_EVENT = {
    "title": "C# Workshop",
    "location": {"venue": "Tech Hub", "address": "123 Main St", "capacity": 100},
    "speakers": [
        {"name": "John Doe", "bio": "Tech Expert", "topic": "C# Modern Features"},
    ],
    "ticket_price": "199.99",
}


class Command(BaseCommand):
    help = "Register a sample event, buy tickets for it and print the result."

    def add_arguments(self, parser):
        parser.add_argument("--quantity", type=int, default=10, help="Tickets to buy.")
        parser.add_argument(
            "--days-ahead",
            type=int,
            default=30,
            help="How many days from now the sample event starts.",
        )

    def handle(self, *args, **options):
        data = {
            **SAMPLE_EVENT,
            "date": (timezone.now() + timedelta(days=options["days_ahead"])).isoformat(),
        }
        serializer = EventSerializer(data=data)
        if not serializer.is_valid():
            raise CommandError(f"Invalid sample event: {serializer.errors}")
        event = serializer.save()

        manager = setup_event_manager(EventManager())
        manager.subscribe(
            lambda evt, message: self.stdout.write(f"New event added: {evt.title} - {message}")
        )

        try:
            manager.add_event(event)
            self.stdout.write(str(event.location.capacity))
            total = manager.purchase_tickets(event, options["quantity"])
        except DomainError as exc:
            raise CommandError(str(exc)) from exc

        self.stdout.write(str(event.location.capacity))
        self.stdout.write(f"Total: ${total:.2f}")
        self.stdout.write(to_detailed_string(event))
        self.stdout.write(f"Is sold out: {event.is_sold_out}")
