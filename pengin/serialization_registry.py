"""Lookup of per-component serialize and deserialize functions."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping

from .entity_id import EntityId
from .field_serializer import FieldSerializer

SerializeFunc = Callable[[FieldSerializer, Any, EntityId, bytearray], None]
DeserializeFunc = Callable[
    [FieldSerializer, Any, EntityId, Mapping[str, Any], Mapping[Any, EntityId]], None
]


class SerializationRegistry:
    """Maps component types to the functions that save and load them.

    The first function registered for a type is kept; later ones are ignored.
    """

    def __init__(self) -> None:
        self._serializers: Dict[type, SerializeFunc] = {}
        self._deserializers: Dict[type, DeserializeFunc] = {}
        self._order: Dict[type, None] = {}

    def register_serializer(self, component_type: type, func: SerializeFunc) -> None:
        if component_type not in self._serializers:
            self._serializers[component_type] = func
            self._order.setdefault(component_type, None)

    def register_deserializer(self, component_type: type, func: DeserializeFunc) -> None:
        if component_type not in self._deserializers:
            self._deserializers[component_type] = func
            self._order.setdefault(component_type, None)

    def serializer_for(self, component_type: type) -> SerializeFunc:
        try:
            return self._serializers[component_type]
        except KeyError:
            raise KeyError(
                f"no serialization function for {component_type.__name__}"
            ) from None

    def deserializer_for(self, component_type: type) -> DeserializeFunc:
        try:
            return self._deserializers[component_type]
        except KeyError:
            raise KeyError(
                f"no deserialization function for {component_type.__name__}"
            ) from None

    def registered_types(self) -> List[type]:
        """Every type with a registered function, in first-registration order."""
        return list(self._order)