from quacker.infrastructure.event_log import (
    EventBus,
    InMemoryEventLog,
)
from quacker.message import (
    Message,
    MessageDeleted,
    MessageQuacked,
    QuackCounter,
    Timeline,
)

__all__ = [
    "EventBus",
    "InMemoryEventLog",
    "Message",
    "MessageQuacked",
    "MessageDeleted",
    "QuackCounter",
    "Timeline",
]
