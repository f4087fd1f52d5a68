"""Access to the ``MANAGING_EVENTS`` setting.

User values are merged over DEFAULTS on every lookup, so overriding the
setting in tests takes effect immediately.
"""

from decimal import Decimal
from typing import Any

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULTS: dict[str, Any] = {
    "BULK_DISCOUNT_THRESHOLD": 5,
    "BULK_DISCOUNT_FACTOR": Decimal("0.9"),
    "SPEAKER_PREMIUM_THRESHOLD": 3,
    "SPEAKER_PREMIUM_FACTOR": Decimal("1.2"),
}

DECIMAL_SETTINGS = ("BULK_DISCOUNT_FACTOR", "SPEAKER_PREMIUM_FACTOR")
INTEGER_SETTINGS = ("BULK_DISCOUNT_THRESHOLD", "SPEAKER_PREMIUM_THRESHOLD")


def get_events_settings() -> dict[str, Any]:
    user_settings = getattr(settings, "MANAGING_EVENTS", None) or {}
    unknown = set(user_settings) - set(DEFAULTS)
    if unknown:
        raise ImproperlyConfigured(f"Unknown MANAGING_EVENTS keys: {', '.join(sorted(unknown))}")

    merged = {**DEFAULTS, **user_settings}
    for key in DECIMAL_SETTINGS:
        merged[key] = Decimal(str(merged[key]))
    for key in INTEGER_SETTINGS:
        merged[key] = int(merged[key])
    return merged
