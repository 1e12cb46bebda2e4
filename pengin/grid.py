"""A grid of typed cells that may each reference an entity."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple

from .components import UUIDComponent
from .entity_id import NULL_ENTITY_ID, EntityId
from .field_serializer import FieldSerializer

NULL_UUID_TEXT = "NULL_UUID"


@dataclass
class GridCellData:
    """One grid cell: a type code and an optional entity standing on it."""

    type: int = 0
    entity: EntityId = NULL_ENTITY_ID

    def reset(self) -> None:
        self.type = 0
        self.entity = NULL_ENTITY_ID

    def serialize(self, serializer: FieldSerializer, fields_out: bytearray, ecs: Any) -> None:
        serializer.serialize_field("Type", self.type, ecs, fields_out)
        if self.entity == NULL_ENTITY_ID:
            entity_text = NULL_UUID_TEXT
        else:
            entity_text = str(ecs.get_component(self.entity, UUIDComponent).uuid)
        serializer.serialize_field("EntityId", entity_text, ecs, fields_out)

    def deserialize(
        self,
        serializer: FieldSerializer,
        fields: Mapping[str, Any],
        entity_map: Mapping[Any, EntityId],
    ) -> None:
        self.type = serializer.deserialize_field("Type", int, fields, entity_map)
        uuid_text = serializer.deserialize_field("EntityId", str, fields, entity_map)
        if not uuid_text:
            raise ValueError("grid cell has an empty entity reference")
        if uuid_text == NULL_UUID_TEXT:
            self.entity = NULL_ENTITY_ID
        else:
            self.entity = entity_map[uuid.UUID(uuid_text)]


@dataclass
class GridComponent:
    """A row-major grid of cells with a fixed cell size."""

    rows: int = 0
    cols: int = 0
    cell_width: int = 0
    cell_height: int = 0
    cells: Optional[List[GridCellData]] = None

    def __post_init__(self) -> None:
        if self.cells is None:
            self.cells = [GridCellData() for _ in range(self.rows * self.cols)]
        elif len(self.cells) != self.rows * self.cols:
            raise ValueError("invalid data size for grid construction")

    def total_width(self) -> int:
        return self.cols * self.cell_width

    def total_height(self) -> int:
        return self.rows * self.cell_height

    def is_within_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _check(self, row: int, col: int) -> None:
        if not self.is_within_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) out of bounds")

    def cell_coords(self, x: int, y: int) -> Tuple[int, int]:
        """The (row, col) of the cell containing grid-space point (x, y)."""
        if not (0 <= x < self.total_width() and 0 <= y < self.total_height()):
            raise IndexError(f"coordinates ({x}, {y}) out of bounds")
        return (int(y // self.cell_height), int(x // self.cell_width))

    def cell_position(self, row: int, col: int) -> Tuple[int, int]:
        """The grid-space (x, y) of a cell's top-left corner."""
        self._check(row, col)
        return (col * self.cell_width, row * self.cell_height)

    def set_type(self, row: int, col: int, value: int) -> None:
        self.at(row, col).type = value

    def reset_type(self, row: int, col: int) -> None:
        self.at(row, col).type = 0

    def at(self, row: int, col: int) -> GridCellData:
        self._check(row, col)
        return self.cells[row * self.cols + col]

    @staticmethod
    def serialize(
        serializer: FieldSerializer, ecs: Any, entity_id: EntityId, fields_out: bytearray
    ) -> None:
        comp = ecs.get_component(entity_id, GridComponent)
        serializer.serialize_field("Cells", comp.cells, ecs, fields_out)
        serializer.serialize_field("Rows", comp.rows, ecs, fields_out)
        serializer.serialize_field("Cols", comp.cols, ecs, fields_out)
        serializer.serialize_field("CellWidth", comp.cell_width, ecs, fields_out)
        serializer.serialize_field("CellHeight", comp.cell_height, ecs, fields_out)

    @staticmethod
    def deserialize(
        serializer: FieldSerializer,
        ecs: Any,
        entity_id: EntityId,
        fields: Mapping[str, Any],
        entity_map: Mapping[Any, EntityId],
    ) -> None:
        comp = ecs.add_component(entity_id, GridComponent())
        comp.cells = serializer.deserialize_field(
            "Cells", list[GridCellData], fields, entity_map
        )
        comp.rows = serializer.deserialize_field("Rows", int, fields, entity_map)
        comp.cols = serializer.deserialize_field("Cols", int, fields, entity_map)
        comp.cell_width = serializer.deserialize_field("CellWidth", int, fields, entity_map)
        comp.cell_height = serializer.deserialize_field("CellHeight", int, fields, entity_map)