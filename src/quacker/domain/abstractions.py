from __future__ import annotations
import abc
import datetime as dt
import typing as t

MessageTopic: t.TypeAlias = str
IdType = t.TypeVar("IdType")
Version = t.NewType("Version", int)
IdGenerator = t.Callable[[], str]


class IEvent(abc.ABC):
    """
    Immutable fact that happened in a domain.

    Concrete classes expose `__domain__`, `__message_name__`, `__topic__` and
    `__version__` both on the class and on instances.
    """

    @property
    @abc.abstractmethod
    def __message_id__(self) -> str: ...

    @property
    @abc.abstractmethod
    def __timestamp__(self) -> dt.datetime: ...

    @property
    @abc.abstractmethod
    def __entity_reference__(self) -> str:
        """
        Reference of the aggregate the event belongs to.
        """

    @abc.abstractmethod
    def to_dict(self) -> dict: ...

    @abc.abstractmethod
    def to_json(self) -> str: ...


EventT = t.TypeVar("EventT", bound=IEvent)


class IEventSubscriber(t.Generic[EventT], abc.ABC):
    @abc.abstractmethod
    def subscribed_to_types(self) -> t.Sequence[type[EventT]]:
        """
        Event classes the subscriber is able to handle, in the order it wants to be registered.
        """

    @abc.abstractmethod
    def handle(self, event: EventT): ...


class IEventLog(abc.ABC):
    @property
    @abc.abstractmethod
    def events(self) -> t.Sequence[IEvent]: ...

    @abc.abstractmethod
    def append(self, event: IEvent) -> None:
        """
        Add event to the end of the log.
        Appended events are never moved, replaced or removed.
        """

    @abc.abstractmethod
    def get_stream(self, reference: str) -> t.Sequence[IEvent]:
        """
        Get events of one aggregate in log order.
        If nothing was appended for the reference, return empty list.
        """

    @abc.abstractmethod
    def __len__(self) -> int: ...

    def __iter__(self) -> t.Iterator[IEvent]:
        return iter(self.events)


class IEventBus(abc.ABC):
    @property
    @abc.abstractmethod
    def log(self) -> IEventLog: ...

    @abc.abstractmethod
    def publish(self, event: IEvent) -> None:
        """
        Append event to the log, then notify every subscriber of the event class.
        """

    @abc.abstractmethod
    def subscribe(self, subscriber: IEventSubscriber) -> None: ...

    @abc.abstractmethod
    def get_stream(self, reference: str) -> t.Sequence[IEvent]: ...


class IRootEntity(t.Generic[IdType], abc.ABC):
    @property
    @abc.abstractmethod
    def __reference__(self) -> IdType: ...

    @property
    @abc.abstractmethod
    def __version__(self) -> Version: ...

    @abc.abstractmethod
    def apply(self, event: IEvent) -> None:
        """
        Change the entity state based on the event.
        Events the entity does not know must be ignored.
        """

    @abc.abstractmethod
    def trigger_event(self, bus: IEventBus, event: IEvent) -> None:
        """
        Publish event through the bus and apply it to the entity.
        """
