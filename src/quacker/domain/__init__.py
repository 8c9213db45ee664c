from .abstractions import (
    IEvent,
    IEventBus,
    IEventLog,
    IEventSubscriber,
    IRootEntity,
    Version,
)
from .event import (
    DomainEvent,
    get_event_class,
)
from .entity import RootEntity
from .publisher import DomainEventPublisher
from .types import DomainName

__all__ = [
    "IEvent",
    "IEventBus",
    "IEventLog",
    "IEventSubscriber",
    "IRootEntity",
    "Version",
    "DomainEvent",
    "get_event_class",
    "RootEntity",
    "DomainEventPublisher",
    "DomainName",
]
