import datetime as dt
import typing as t
from uuid import uuid4

from pydantic import (
    BaseModel,
    ConfigDict,
    PrivateAttr,
)

from quacker.domain.abstractions import (
    IEvent,
    MessageTopic,
    Version,
)
from quacker.domain.types import DomainName

_T = t.TypeVar("_T", bound="DomainEvent")


class _DomainEventsCollection:
    def __init__(self):
        self._collection: dict[MessageTopic, type["DomainEvent"]] = dict()

    def register(self, topic: MessageTopic, event_cls: type["DomainEvent"]):
        if topic in self._collection and self._collection[topic] is not event_cls:
            raise ValueError(f"Event {topic} already registered by another class.")
        self._collection[topic] = event_cls

    def get_class(self, topic: MessageTopic) -> type["DomainEvent"]:
        if topic not in self._collection:
            raise ValueError(f"Could not find event {topic}")
        return self._collection[topic]


_domain_events_collection = _DomainEventsCollection()


class DomainEvent(BaseModel, IEvent):
    """
    Base class for immutable domain events.

    Subclasses declare their domain as a class keyword, or inherit it from a base:

        class MessageQuacked(DomainEvent, domain="quacker.message"):
            id: str
            content: str

    Equality is structural: message id and timestamp are metadata and are not compared.
    """

    model_config = ConfigDict(frozen=True)

    _message_id: str = PrivateAttr(default_factory=lambda: str(uuid4()))
    _occurred_on: dt.datetime = PrivateAttr(default_factory=lambda: dt.datetime.now(dt.timezone.utc))

    def __init_subclass__(cls, domain: str | None = None, version: int = 1, **kwargs):
        super().__init_subclass__(**kwargs)
        if domain is not None:
            cls.__domain__ = DomainName(domain)
        elif getattr(cls, "__domain__", None) is None:
            raise ValueError(f"required set domain name for '{cls.__module__}.{cls.__name__}'")
        cls.__message_name__ = cls.__name__
        cls.__topic__ = MessageTopic(f"{cls.__domain__}.{cls.__name__}")
        cls.__version__ = Version(version)
        _domain_events_collection.register(cls.__topic__, cls)

    @property
    def __message_id__(self) -> str:
        return self._message_id

    @property
    def __timestamp__(self) -> dt.datetime:
        return self._occurred_on

    @classmethod
    def load(cls: type[_T], payload: t.Mapping | str | bytes) -> _T:
        if isinstance(payload, (str, bytes)):
            return cls.model_validate_json(payload)
        return cls.model_validate(payload)

    def to_dict(self) -> dict:
        return self.model_dump()

    def to_json(self) -> str:
        return self.model_dump_json()

    def __eq__(self, other):
        return type(other) is type(self) and self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash((self.__topic__, self.to_json()))

    def __repr__(self):
        return f"{self.__topic__}:{self.to_json()}"


def get_event_class(topic: MessageTopic) -> type[DomainEvent]:
    return _domain_events_collection.get_class(topic)


def register_event_alias(alias: MessageTopic, event_cls: type[DomainEvent]):
    _domain_events_collection.register(alias, event_cls)
