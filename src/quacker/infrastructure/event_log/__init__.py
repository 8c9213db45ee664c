from .in_memory import InMemoryEventLog
from .bus import EventBus

__all__ = ["InMemoryEventLog", "EventBus"]
