import logging
import typing as t

from quacker.domain.abstractions import (
    EventT,
    IEvent,
    IEventBus,
    IEventLog,
    IEventSubscriber,
)
from quacker.domain.publisher import DomainEventPublisher
from quacker.infrastructure.event_log.in_memory import InMemoryEventLog


class EventBus(IEventBus):
    """
    Single source of truth for what happened, with synchronous fan-out.

    `publish` appends the event to the log and then calls every subscriber of the
    event class in subscription order, all before returning.
    Subscribers added later do not receive events that were already published.
    """

    def __init__(
        self,
        log: IEventLog | None = None,
        publisher: DomainEventPublisher | None = None,
        logger_name: str = "quacker.event_bus",
    ):
        self._log = log if log is not None else InMemoryEventLog()
        self._publisher = publisher or DomainEventPublisher()
        self._logger = logging.getLogger(logger_name)

    @property
    def log(self) -> IEventLog:
        return self._log

    @property
    def events(self) -> t.Sequence[IEvent]:
        return self._log.events

    @property
    def subscribers(self) -> list[IEventSubscriber]:
        return self._publisher.subscribers

    def subscribe(self, subscriber: IEventSubscriber[EventT]) -> None:
        self._publisher.subscribe(subscriber)
        self._logger.debug("Subscribed %r to %s", subscriber, list(subscriber.subscribed_to_types()))

    def publish(self, event: IEvent) -> None:
        if not isinstance(event, IEvent):
            raise TypeError(f"Unexpected event type {event!r}")
        self._log.append(event)
        try:
            self._publisher.publish(event)
        except Exception as exc:
            self._logger.error(f"Subscriber failed while handling {event!r}", exc_info=exc)
            raise

    def get_stream(self, reference: str) -> t.Sequence[IEvent]:
        return self._log.get_stream(reference)
