from .aggregate import (
    Message,
    generate_message_id,
)
from .events import (
    MessageDeleted,
    MessageEvent,
    MessageQuacked,
)
from .projections import (
    QuackCounter,
    Timeline,
    TimelineMessage,
)

__all__ = [
    "Message",
    "generate_message_id",
    "MessageEvent",
    "MessageQuacked",
    "MessageDeleted",
    "QuackCounter",
    "Timeline",
    "TimelineMessage",
]
