from pydantic import (
    BaseModel,
    ConfigDict,
)

from quacker.application import (
    Projection,
    when,
)
from quacker.message.events import (
    MessageDeleted,
    MessageQuacked,
)


class QuackCounter(Projection):
    """
    Number of quacked messages minus deleted ones.

    There is no floor: a delete replayed without its quack makes the count negative.
    """

    def __init__(self, logger_name: str = "quacker.projection.counter"):
        super().__init__(logger_name=logger_name)
        self._nb = 0

    @property
    def nb(self) -> int:
        return self._nb

    @when(MessageQuacked)
    def quacked(self, event: MessageQuacked):
        self._nb += 1

    @when(MessageDeleted)
    def deleted(self, event: MessageDeleted):
        self._nb -= 1

    def __repr__(self):
        return f"QuackCounter(nb={self._nb})"


class TimelineMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: str


class Timeline(Projection):
    # Deleted messages stay on the timeline.

    def __init__(self, logger_name: str = "quacker.projection.timeline"):
        super().__init__(logger_name=logger_name)
        self._messages: list[TimelineMessage] = []

    @property
    def messages(self) -> tuple[TimelineMessage, ...]:
        return tuple(self._messages)

    @when(MessageQuacked)
    def quacked(self, event: MessageQuacked):
        self._messages.append(TimelineMessage(content=event.content))

    def __repr__(self):
        return f"Timeline(messages={len(self._messages)})"
