import pytest

from quacker.domain import (
    DomainEvent,
    IEventLog,
)
from quacker.infrastructure.event_log import InMemoryEventLog


class StoredEvent(DomainEvent, domain="test.event-log"):
    reference: str
    name: str

    @property
    def __entity_reference__(self) -> str:
        return self.reference


@pytest.fixture
def log():
    return InMemoryEventLog()


class TestInMemoryEventLog:
    def test_must_impl(self, log):
        assert isinstance(log, IEventLog)

    def test_could_be_empty(self, log):
        assert log.events == ()
        assert len(log) == 0
        assert list(log) == []

    def test_could_append(self, log):
        first = StoredEvent(reference="a", name="first")
        second = StoredEvent(reference="b", name="second")

        log.append(first)
        log.append(second)

        assert log.events == (first, second)
        assert len(log) == 2
        assert list(log) == [first, second]

    def test_could_init_with_history(self):
        event = StoredEvent(reference="a", name="first")
        assert InMemoryEventLog([event]).events == (event,)

    def test_must_return_snapshot(self, log):
        log.append(StoredEvent(reference="a", name="first"))
        events = log.events

        log.append(StoredEvent(reference="a", name="second"))

        assert len(events) == 1
        assert len(log.events) == 2

    def test_could_get_stream_of_reference(self, log):
        first = StoredEvent(reference="a", name="first")
        other = StoredEvent(reference="b", name="other")
        second = StoredEvent(reference="a", name="second")
        for event in (first, other, second):
            log.append(event)

        assert log.get_stream("a") == [first, second]
        assert log.get_stream("b") == [other]

    def test_could_get_empty_stream(self, log):
        assert log.get_stream("unknown") == []
