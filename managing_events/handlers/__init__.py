from managing_events.handlers.formatting import to_detailed_string
from managing_events.handlers.serializers import (
    EventLocationSerializer,
    EventSerializer,
    EventSpeakerSerializer,
)

__all__ = [
    "EventSerializer",
    "EventLocationSerializer",
    "EventSpeakerSerializer",
    "to_detailed_string",
]
