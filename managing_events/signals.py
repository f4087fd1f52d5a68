"""Change notification for the event registry.

Each EventManager owns an EventAddedSignal. Subscribers are plain
``handler(event, message)`` callables; they are adapted to Django receivers
and held strongly, so lambdas and closures stay connected.
"""

import logging
from collections.abc import Callable
from typing import Any

from django.dispatch import Signal

from managing_events.domain import Event

logger = logging.getLogger(__name__)

EventHandler = Callable[[Event, str], None]


def _handler_id(handler: EventHandler) -> tuple[int, ...]:
    # Bound methods are recreated on every attribute access.
    if hasattr(handler, "__self__") and hasattr(handler, "__func__"):
        return (id(handler.__self__), id(handler.__func__))
    return (id(handler),)


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__qualname__", repr(handler))


class EventAddedSignal(Signal):
    """Sent synchronously, in subscription order, after an event is added."""

    def subscribe(self, handler: EventHandler) -> None:
        if not callable(handler):
            raise TypeError(f"Event handler must be callable, got {handler!r}")

        def receiver(sender: Any, event: Event, message: str, **kwargs: Any) -> None:
            handler(event, message)

        receiver.__qualname__ = _handler_name(handler)
        self.connect(receiver, weak=False, dispatch_uid=_handler_id(handler))

    def unsubscribe(self, handler: EventHandler) -> bool:
        """Disconnect ``handler``; return False if it was not subscribed."""
        return self.disconnect(dispatch_uid=_handler_id(handler))

    def notify(self, sender: Any, event: Event, message: str) -> list[Exception]:
        """Deliver to every subscriber, isolating failures.

        Returns the exceptions raised by failing subscribers, each already logged.
        """
        failures = []
        for receiver, response in self.send_robust(sender=sender, event=event, message=message):
            if isinstance(response, Exception):
                logger.error(
                    "Subscriber %s failed for event %r: %s",
                    receiver.__qualname__,
                    event.title,
                    response,
                )
                failures.append(response)
        return failures
