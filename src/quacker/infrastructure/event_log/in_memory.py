import logging
import typing as t

from quacker.domain.abstractions import (
    IEvent,
    IEventLog,
)


class InMemoryEventLog(IEventLog):
    def __init__(self, events: t.Iterable[IEvent] = (), logger_name: str = "quacker.event_log"):
        self._events: list[IEvent] = list(events)
        self._logger = logging.getLogger(logger_name)

    @property
    def events(self) -> tuple[IEvent, ...]:
        return tuple(self._events)

    def append(self, event: IEvent) -> None:
        self._events.append(event)
        self._logger.debug("Appended %r at position %d", event, len(self._events) - 1)

    def get_stream(self, reference: str) -> list[IEvent]:
        return [event for event in self._events if str(event.__entity_reference__) == str(reference)]

    def __len__(self) -> int:
        return len(self._events)
