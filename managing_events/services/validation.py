"""Validation rules gating event registration.

A rule is any callable taking an Event and returning True when the event is
acceptable. The registry AND-combines whatever rules it is given; the three
functions below are the reference policy installed by setup_event_manager.
"""

from collections.abc import Callable, Iterable

from django.utils import timezone

from managing_events.domain import Event

ValidationRule = Callable[[Event], bool]


def rule_name(rule: ValidationRule) -> str:
    return getattr(rule, "__name__", None) or repr(rule)


def failed_rules(event: Event, rules: Iterable[ValidationRule]) -> list[str]:
    """Return the names of the rules ``event`` does not satisfy, in rule order."""
    return [rule_name(rule) for rule in rules if not rule(event)]


def date_in_future(event: Event) -> bool:
    date = event.date
    if timezone.is_naive(date):
        date = timezone.make_aware(date)
    return date > timezone.now()


def has_positive_price(event: Event) -> bool:
    return event.ticket_price.amount > 0


def has_speakers(event: Event) -> bool:
    return len(event.speakers) > 0


DEFAULT_RULES: tuple[ValidationRule, ...] = (
    date_in_future,
    has_positive_price,
    has_speakers,
)
