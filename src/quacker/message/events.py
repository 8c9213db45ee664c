from quacker.domain import (
    DomainEvent,
    DomainName,
)

__domain__ = DomainName("quacker.message")


class MessageEvent(DomainEvent, domain=__domain__):
    id: str

    @property
    def __entity_reference__(self) -> str:
        return self.id


class MessageQuacked(MessageEvent):
    content: str


class MessageDeleted(MessageEvent): ...
