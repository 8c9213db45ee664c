import typing as t
from unittest.mock import Mock

import pytest

from quacker.domain import (
    DomainEvent,
    DomainName,
    IEvent,
    IEventBus,
    RootEntity,
    Version,
)

__domain__ = DomainName("test.entity")


class BaseEntityEvent(DomainEvent, domain=__domain__):
    reference: str

    @property
    def __entity_reference__(self) -> str:
        return self.reference


class EntityCreated(BaseEntityEvent):
    name: str


class EntityRenamed(BaseEntityEvent):
    name: str


class EntityArchived(BaseEntityEvent): ...


class SomeRootEntity(RootEntity[str]):
    def __init__(self, history: t.Iterable[IEvent] = ()):
        self.name: str | None = None
        super().__init__(history)

    def rename(self, bus: IEventBus, name: str):
        self.trigger_event(bus, EntityRenamed(reference=self.__reference__, name=name))

    def apply(self, event: IEvent) -> None:
        if isinstance(event, EntityCreated):
            self._reference = event.reference
            self.name = event.name
        elif isinstance(event, EntityRenamed):
            self.name = event.name


@pytest.fixture
def bus():
    return Mock(spec=IEventBus)


class TestRootEntity:
    def test_empty_entity(self):
        entity = SomeRootEntity()
        assert entity.__reference__ is None
        assert entity.__version__ == Version(0)

    def test_could_be_restored_from_events(self):
        entity = SomeRootEntity(
            [
                EntityCreated(reference="entity-1", name="before"),
                EntityRenamed(reference="entity-1", name="after"),
            ]
        )

        assert entity.__reference__ == "entity-1"
        assert entity.name == "after"
        assert entity.__version__ == Version(2)

    def test_must_skip_unknown_events(self):
        entity = SomeRootEntity(
            [
                EntityCreated(reference="entity-1", name="before"),
                EntityArchived(reference="entity-1"),
            ]
        )

        assert entity.name == "before"

    def test_could_publish_and_apply_when_trigger(self, bus):
        entity = SomeRootEntity([EntityCreated(reference="entity-1", name="before")])

        entity.rename(bus, "after")

        bus.publish.assert_called_once_with(EntityRenamed(reference="entity-1", name="after"))
        assert entity.name == "after"
        assert entity.__version__ == Version(2)

    def test_must_not_apply_if_publish_failed(self, bus):
        bus.publish.side_effect = RuntimeError("failed")
        entity = SomeRootEntity([EntityCreated(reference="entity-1", name="before")])

        with pytest.raises(RuntimeError):
            entity.rename(bus, "after")

        assert entity.name == "before"

    def test_could_load_from_stream(self, bus):
        bus.get_stream.return_value = [EntityCreated(reference="entity-1", name="loaded")]

        entity = SomeRootEntity.load(bus, "entity-1")

        bus.get_stream.assert_called_once_with("entity-1")
        assert entity.name == "loaded"

    def test_entity_eq(self):
        history = [EntityCreated(reference="entity-1", name="name")]
        assert SomeRootEntity(history) == SomeRootEntity(history)
        assert hash(SomeRootEntity(history)) == hash("entity-1")

    def test_entity_neq_with_other_version(self):
        created = EntityCreated(reference="entity-1", name="name")
        renamed = EntityRenamed(reference="entity-1", name="other")
        assert SomeRootEntity([created]) != SomeRootEntity([created, renamed])
