"""Core components: identity, player ownership, physics body, collider and debug data."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence, Tuple

from .entity_id import EntityId
from .field_serializer import FieldSerializer
from .serialization_registry import SerializationRegistry
from .util import Rect

Vec3 = Tuple[float, float, float]
Color = Tuple[int, int, int, int]

DYNAMIC_COLLISION = 0
"""The collision type a new body starts with."""


def _vec3(values: Sequence[float]) -> Vec3:
    if len(values) != 3:
        raise ValueError(f"expected 3 components, got {len(values)}")
    x, y, z = values
    return (float(x), float(y), float(z))


@dataclass
class UUIDComponent:
    """A persistent identifier for an entity, stable across save and load."""

    uuid: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass
class PlayerComponent:
    """Marks an entity as controlled by the user with the given index."""

    user_index: Optional[uuid.UUID] = None


@dataclass
class BodyComponent:
    """Positions and velocities used by the physics simulation."""

    velocity: Vec3 = (0.0, 0.0, 0.0)
    current_position: Vec3 = (0.0, 0.0, 0.0)
    last_position: Vec3 = (0.0, 0.0, 0.0)
    input_velocity: Vec3 = (0.0, 0.0, 0.0)
    last_frame_input_velocity: Vec3 = (0.0, 0.0, 0.0)
    coll_type: int = DYNAMIC_COLLISION

    @staticmethod
    def serialize(
        serializer: FieldSerializer, ecs: Any, entity_id: EntityId, fields_out: bytearray
    ) -> None:
        comp = ecs.get_component(entity_id, BodyComponent)
        serializer.serialize_field("Velocity", list(comp.velocity), ecs, fields_out)
        serializer.serialize_field("CurrPosition", list(comp.current_position), ecs, fields_out)
        serializer.serialize_field("LastPosition", list(comp.last_position), ecs, fields_out)
        serializer.serialize_field("CollType", comp.coll_type, ecs, fields_out)

    @staticmethod
    def deserialize(
        serializer: FieldSerializer,
        ecs: Any,
        entity_id: EntityId,
        fields: Mapping[str, Any],
        entity_map: Mapping[Any, EntityId],
    ) -> None:
        comp = ecs.add_component(entity_id, BodyComponent())
        comp.velocity = _vec3(
            serializer.deserialize_field("Velocity", list[float], fields, entity_map)
        )
        comp.current_position = _vec3(
            serializer.deserialize_field("CurrPosition", list[float], fields, entity_map)
        )
        comp.last_position = _vec3(
            serializer.deserialize_field("LastPosition", list[float], fields, entity_map)
        )
        comp.coll_type = serializer.deserialize_field("CollType", int, fields, entity_map)


@dataclass
class RectColliderComponent:
    """An axis-aligned collision rectangle relative to the entity's position."""

    coll_rect: Rect = field(default_factory=lambda: Rect(0, 0, 1, 1))

    def __post_init__(self) -> None:
        if self.coll_rect.width <= 0 or self.coll_rect.height <= 0:
            raise ValueError("collider width and height must be positive")

    @staticmethod
    def serialize(
        serializer: FieldSerializer, ecs: Any, entity_id: EntityId, fields_out: bytearray
    ) -> None:
        rect = ecs.get_component(entity_id, RectColliderComponent).coll_rect
        serializer.serialize_field(
            "CollRect", [rect.x, rect.y, rect.width, rect.height], ecs, fields_out
        )

    @staticmethod
    def deserialize(
        serializer: FieldSerializer,
        ecs: Any,
        entity_id: EntityId,
        fields: Mapping[str, Any],
        entity_map: Mapping[Any, EntityId],
    ) -> None:
        values = serializer.deserialize_field("CollRect", list[int], fields, entity_map)
        if len(values) != 4:
            raise ValueError("CollRect must hold 4 values")
        ecs.add_component(entity_id, RectColliderComponent(Rect(*values)))


@dataclass
class FPSCounterComponent:
    """Frame counting state; it is not saved, only recreated on load."""

    frame_count: int = 0
    accumulated_time: float = 0.0

    @staticmethod
    def serialize(
        serializer: FieldSerializer, ecs: Any, entity_id: EntityId, fields_out: bytearray
    ) -> None:
        """Check the entity has the component; no fields are written for it."""
        ecs.get_component(entity_id, FPSCounterComponent)

    @staticmethod
    def deserialize(
        serializer: FieldSerializer,
        ecs: Any,
        entity_id: EntityId,
        fields: Mapping[str, Any],
        entity_map: Mapping[Any, EntityId],
    ) -> None:
        ecs.add_component(entity_id, FPSCounterComponent())


@dataclass
class DebugDrawComponent:
    """A coloured rectangle drawn for debugging."""

    color: Color = (0, 0, 0, 0)
    width: int = 0
    height: int = 0
    fill: bool = False


def register_components(registry: SerializationRegistry) -> None:
    """Register the save and load functions of every engine component."""
    from .animation import AnimationComponent
    from .grid import GridComponent

    for component_type in (
        BodyComponent,
        RectColliderComponent,
        FPSCounterComponent,
        GridComponent,
        AnimationComponent,
    ):
        registry.register_serializer(component_type, component_type.serialize)
        registry.register_deserializer(component_type, component_type.deserialize)