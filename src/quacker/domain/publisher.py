import typing as t
from collections import defaultdict

from quacker.domain.abstractions import (
    IEvent,
    IEventSubscriber,
    EventT,
)


class DomainEventPublisher:
    def __init__(self):
        self._subscribers: list[IEventSubscriber] = []
        self._routes: dict[type[IEvent], list[IEventSubscriber]] = defaultdict(list)

    def subscribe(self, subscriber: IEventSubscriber[EventT]):
        event_types = list(dict.fromkeys(subscriber.subscribed_to_types()))
        if not event_types:
            raise ValueError(f"Subscriber {subscriber!r} is not subscribed to any event type")
        for event_type in event_types:
            self._routes[event_type].append(subscriber)
        self._subscribers.append(subscriber)

    def publish(self, event: IEvent):
        for subscriber in self.get_subscribers(type(event)):
            subscriber.handle(event)

    def get_subscribers(self, event_type: type[IEvent]) -> t.Sequence[IEventSubscriber]:
        return tuple(self._routes.get(event_type, ()))

    @property
    def subscribers(self):
        return list(self._subscribers)
