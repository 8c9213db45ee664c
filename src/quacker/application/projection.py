import logging
import typing as t

from quacker.domain.abstractions import (
    IEvent,
    IEventSubscriber,
)

_HANDLES_ATTR = "__handles_event__"


def when(event_type: type[IEvent]):
    """
    Mark a projection method as the handler of `event_type`.

    The decorated method is called with the event each time the bus publishes
    an instance of exactly that class.
    """
    if not (isinstance(event_type, type) and issubclass(event_type, IEvent)):
        raise TypeError(f"{event_type!r} required be subclass of {IEvent!r}")

    def wrapper(func):
        setattr(func, _HANDLES_ATTR, event_type)
        return func

    return wrapper


class Projection(IEventSubscriber[IEvent]):
    """
    Read model built from the event stream.

    Handlers are declared with `when`; events of other classes are ignored.

    Example:

        class Counter(Projection):
            def __init__(self):
                super().__init__()
                self.nb = 0

            @when(MessageQuacked)
            def quacked(self, event: MessageQuacked):
                self.nb += 1
    """

    _handlers: t.ClassVar[dict[type[IEvent], str]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        handlers: dict[type[IEvent], str] = {}
        for base in reversed(cls.__mro__):
            for name, attr in vars(base).items():
                event_type = getattr(attr, _HANDLES_ATTR, None)
                if event_type is not None:
                    handlers[event_type] = name
        cls._handlers = handlers

    def __init__(self, logger_name: str = "quacker.projection"):
        self._logger = logging.getLogger(logger_name)

    @classmethod
    def replay(cls, events: t.Iterable[IEvent], *args, **kwargs):
        """
        Build a fresh projection from an already recorded history.
        """
        projection = cls(*args, **kwargs)
        for event in events:
            projection.handle(event)
        return projection

    def subscribed_to_types(self) -> tuple[type[IEvent], ...]:
        return tuple(self._handlers)

    def handle(self, event: IEvent):
        name = self._handlers.get(type(event))
        if name is None:
            self._logger.debug("%s skipped %r", self.__class__.__name__, event)
            return
        getattr(self, name)(event)

    def __repr__(self):
        return f"{self.__class__.__name__}()"
