import logging
import typing as t
import uuid

from quacker.domain import (
    IEvent,
    IEventBus,
    RootEntity,
)
from quacker.domain.abstractions import IdGenerator
from quacker.message.events import (
    MessageDeleted,
    MessageQuacked,
)

logger = logging.getLogger(__name__)


def generate_message_id() -> str:
    return str(uuid.uuid4())


class Message(RootEntity[str]):
    """
    Write side of a quacked message.

    Built fresh for every command by replaying the message history:

        message = Message.load(bus, message_id)
        message.delete(bus)
    """

    def __init__(self, history: t.Iterable[IEvent] = ()):
        self._content: str | None = None
        self._is_deleted = False
        super().__init__(history)

    @property
    def id(self) -> str | None:
        return self._reference

    @property
    def is_deleted(self) -> bool:
        return self._is_deleted

    def get_content(self) -> str | None:
        return self._content

    @classmethod
    def quack(cls, bus: IEventBus, content: str, id_generator: IdGenerator = generate_message_id) -> "Message":
        message = cls()
        message.trigger_event(bus, MessageQuacked(id=id_generator(), content=content))
        return message

    def delete(self, bus: IEventBus) -> None:
        if self._is_deleted:
            logger.debug("Message %s is already deleted", self._reference)
            return
        if self._reference is None:
            raise RuntimeError("Can not delete message that was never quacked")
        self.trigger_event(bus, MessageDeleted(id=self._reference))

    def apply(self, event: IEvent) -> None:
        if isinstance(event, MessageQuacked):
            self._reference = event.id
            self._content = event.content
        elif isinstance(event, MessageDeleted):
            self._is_deleted = True
        else:
            logger.debug("Message skipped unknown event %r", event)

    def __repr__(self):
        return f"Message(id={self._reference!r}, is_deleted={self._is_deleted})"
