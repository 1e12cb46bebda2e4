"""Entity-component store with deferred destruction and removal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple, Type, TypeVar

from .entity_id import NULL_ENTITY_ID, EntityId
from .sparse_set import SparseSet

C = TypeVar("C")


class ComponentView:
    """A view over every component of one type, in dense storage order."""

    def __init__(self, storage: Optional[SparseSet[EntityId, Any]]) -> None:
        self._storage = storage

    def __len__(self) -> int:
        return 0 if self._storage is None else len(self._storage)

    def __iter__(self) -> Iterator[Any]:
        if self._storage is None:
            return iter(())
        return iter(self._storage)

    def get_component(self, entity_id: EntityId) -> Any:
        """The component owned by ``entity_id``; raises KeyError if it has none."""
        if self._storage is None or entity_id not in self._storage:
            raise KeyError(f"component not found for entity {entity_id}")
        return self._storage[entity_id]

    def items(self) -> Iterator[Tuple[EntityId, Any]]:
        """(entity id, component) pairs in dense storage order."""
        if self._storage is None:
            return iter(())
        return self._storage.items()


@dataclass(frozen=True)
class _PendingRemoval:
    entity_id: EntityId
    component_type: type


class ECS:
    """Owns entities and their components, keyed by component type."""

    def __init__(self) -> None:
        self._storages: Dict[type, SparseSet[EntityId, Any]] = {}
        self._entities: Dict[EntityId, List[type]] = {}
        self._next_id: EntityId = 0
        self._to_destroy: List[EntityId] = []
        self._to_remove: List[_PendingRemoval] = []

    def create_entity(self) -> EntityId:
        """Create a new entity with no components and return its id."""
        entity_id = self._next_id
        if entity_id == NULL_ENTITY_ID:
            raise OverflowError("no entity ids left")
        self._next_id += 1
        self._entities[entity_id] = []
        return entity_id

    def exists(self, entity_id: EntityId) -> bool:
        return entity_id in self._entities

    def all_entities(self) -> List[EntityId]:
        """Every live entity id in creation order."""
        return list(self._entities)

    def component_types(self, entity_id: EntityId) -> List[type]:
        """The types of the components ``entity_id`` owns, in the order they were added."""
        try:
            return list(self._entities[entity_id])
        except KeyError:
            raise KeyError(f"entity {entity_id} does not exist") from None

    def destroy_entity(self, entity_id: EntityId) -> None:
        """Schedule the entity for destruction at the next clean-up."""
        self._to_destroy.append(entity_id)

    def add_component(self, entity_id: EntityId, component: C) -> C:
        """Attach ``component`` to the entity, keyed by its type, and return it."""
        owned = self._entities.get(entity_id)
        if owned is None:
            raise KeyError(f"entity {entity_id} does not exist")
        component_type = type(component)
        storage = self._storages.setdefault(component_type, SparseSet())
        storage.emplace(entity_id, component)
        owned.append(component_type)
        return component

    def remove_component(self, entity_id: EntityId, component_type: type) -> None:
        """Schedule removal of a component at the next clean-up."""
        self._to_remove.append(_PendingRemoval(entity_id, component_type))

    def has_component(self, entity_id: EntityId, component_type: type) -> bool:
        storage = self._storages.get(component_type)
        return storage is not None and entity_id in storage

    def get_component(self, entity_id: EntityId, component_type: Type[C]) -> C:
        """The entity's component of that type; raises KeyError if it has none."""
        storage = self._storages.get(component_type)
        if storage is None or entity_id not in storage:
            raise KeyError(
                f"entity {entity_id} has no {component_type.__name__} component"
            )
        return storage[entity_id]

    def get_components(self, component_type: type) -> ComponentView:
        """A view over every component of that type."""
        return ComponentView(self._storages.get(component_type))

    def clean_up_destroys(self) -> None:
        """Carry out the scheduled entity destructions, then component removals."""
        for entity_id in self._to_destroy:
            owned = self._entities.pop(entity_id, None)
            if owned is None:
                continue
            for component_type in owned:
                self._storages[component_type].remove(entity_id)
        self._to_destroy.clear()

        for pending in self._to_remove:
            owned = self._entities.get(pending.entity_id)
            if owned is None or pending.component_type not in owned:
                continue
            owned.remove(pending.component_type)
            self._storages[pending.component_type].remove(pending.entity_id)
        self._to_remove.clear()