import abc
import typing as t

from quacker.domain.abstractions import (
    IdType,
    IEvent,
    IEventBus,
    IEventLog,
    IRootEntity,
    Version,
)


class RootEntity(IRootEntity[IdType], abc.ABC):
    """
    Event-sourced aggregate root.

    State is never set directly: it is rebuilt by replaying history through `apply`
    and changed afterwards only by `trigger_event`.
    """

    def __init__(self, history: t.Iterable[IEvent] = ()):
        self._reference: IdType | None = None
        self._version = Version(0)
        for event in history:
            self._mutate(event)

    @property
    def __reference__(self) -> IdType | None:
        return self._reference

    @property
    def __version__(self) -> Version:
        return self._version

    @classmethod
    def load(cls, source: IEventBus | IEventLog, reference: IdType):
        """
        Rebuild the entity from the events the bus or log recorded for `reference`.
        """
        return cls(source.get_stream(str(reference)))

    def trigger_event(self, bus: IEventBus, event: IEvent) -> None:
        bus.publish(event)
        self._mutate(event)

    def _mutate(self, event: IEvent) -> None:
        self.apply(event)
        self._version = Version(self._version + 1)

    def __eq__(self, other):
        return (
            isinstance(other, self.__class__)
            and self.__reference__ == other.__reference__
            and self.__version__ == other.__version__
        )

    def __hash__(self):
        return hash(self._reference)
