"""Writing and reading single component fields as JSON text."""

from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, Optional, Union, get_args, get_origin

RawField = Union[str, bytes, bytearray]


class SerializationType(Enum):
    """The text format a :class:`FieldSerializer` writes and reads."""

    JSON = 0
    INVALID = 1


def _raw_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _as_text(raw: RawField) -> str:
    if isinstance(raw, (bytes, bytearray)):
        return raw.decode("utf-8")
    return raw


def parse_json_object(text: RawField) -> Dict[str, str]:
    """Split a JSON object or array into its members' raw text.

    Object members are keyed by name, array elements by their index as a
    string. String members come back without quotes; every other member
    comes back as compact JSON text.
    """
    data = json.loads(_as_text(text))
    if isinstance(data, dict):
        members = data.items()
    elif isinstance(data, list):
        members = ((str(index), value) for index, value in enumerate(data))
    else:
        raise ValueError("expected a JSON object or array")
    return {key: _raw_text(value) for key, value in members}


def _format_float(value: float) -> str:
    return format(value, ".6g")


class FieldSerializer:
    """Appends named fields to a component's text and reads them back."""

    def __init__(self, ser_type: SerializationType = SerializationType.JSON) -> None:
        self._ser_type = ser_type

    @property
    def ser_type(self) -> SerializationType:
        return self._ser_type

    def _check_type(self) -> None:
        if self._ser_type is not SerializationType.JSON:
            raise ValueError(f"invalid serialization type: {self._ser_type.name}")

    def serialize_field(
        self, name: str, value: Any, ecs: Any, fields_out: bytearray
    ) -> None:
        """Append ``"name":value`` to ``fields_out``.

        ``fields_out`` is expected to begin with ``{``; a separating comma is
        written before every field except the first.
        """
        self._check_type()
        prefix = "," if len(fields_out) > 1 else ""
        text = f"{prefix}{json.dumps(name, ensure_ascii=False)}:{self._value_to_json(value, ecs)}"
        fields_out.extend(text.encode("utf-8"))

    def _value_to_json(self, value: Any, ecs: Any) -> str:
        if isinstance(value, Enum):
            underlying = value.value
            if isinstance(underlying, bool) or not isinstance(underlying, int):
                raise TypeError(f"enum {type(value).__name__} has no integer value")
            return str(int(underlying))
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            return _format_float(value)
        if isinstance(value, str):
            return json.dumps(value, ensure_ascii=False)
        if isinstance(value, Mapping):
            pairs = (
                f"[{self._value_to_json(key, ecs)},{self._value_to_json(item, ecs)}]"
                for key, item in value.items()
            )
            return "[" + ",".join(pairs) + "]"
        if isinstance(value, (list, tuple, set, frozenset, bytes, bytearray)):
            return "[" + ",".join(self._value_to_json(item, ecs) for item in value) + "]"
        if callable(getattr(value, "serialize", None)):
            nested = bytearray(b"{")
            value.serialize(self, nested, ecs)
            nested.extend(b"}")
            return nested.decode("utf-8")
        raise TypeError(f"cannot serialize a field of type {type(value).__name__}")

    def deserialize_field(
        self,
        name: str,
        kind: Any,
        fields: Mapping[str, RawField],
        entity_map: Optional[Mapping[Any, int]],
    ) -> Any:
        """Read the field ``name`` from ``fields`` as a value of ``kind``.

        ``kind`` is a plain type (``int``, ``float``, ``bool``, ``str``, an
        enum, or a class with a ``deserialize`` method) or a parameterised
        ``list``, ``tuple`` or ``dict``.
        """
        self._check_type()
        try:
            raw = fields[name]
        except KeyError:
            raise KeyError(
                f"field {name!r} not found: wrong name or never serialized"
            ) from None
        return self._value_from_json(_as_text(raw), kind, entity_map or {})

    def _value_from_json(self, text: str, kind: Any, entity_map: Mapping[Any, int]) -> Any:
        origin = get_origin(kind)
        if origin is not None:
            args = get_args(kind)
            if origin is dict:
                return self._dict_from_json(text, args, entity_map)
            if origin in (list, tuple):
                return self._sequence_from_json(text, origin, args, entity_map)
            raise TypeError(f"cannot deserialize a field of kind {kind!r}")

        if not isinstance(kind, type):
            raise TypeError(f"cannot deserialize a field of kind {kind!r}")
        if issubclass(kind, Enum):
            return kind(int(text))
        if kind is bool:
            return text == "true"
        if kind is str:
            return text
        if issubclass(kind, int):
            return kind(int(text))
        if kind is float:
            return float(text)
        if kind in (list, tuple, dict, set, frozenset):
            raise TypeError(f"{kind.__name__} needs its element types, e.g. list[int]")
        if callable(getattr(kind, "deserialize", None)):
            instance = kind()
            instance.deserialize(self, parse_json_object(text), entity_map)
            return instance
        raise TypeError(f"cannot deserialize a field of type {kind.__name__}")

    def _sequence_from_json(
        self, text: str, origin: type, args: tuple, entity_map: Mapping[Any, int]
    ) -> Any:
        members = parse_json_object(text)
        if origin is tuple and not (len(args) == 2 and args[1] is Ellipsis):
            if len(args) != len(members):
                raise ValueError("tuple length does not match the serialized field")
            element_kinds = list(args)
        else:
            if not args:
                raise TypeError("sequence kind needs an element type")
            element_kinds = [args[0]] * len(members)

        result: list = [None] * len(members)
        for key, raw in members.items():
            index = int(key)
            result[index] = self._value_from_json(raw, element_kinds[index], entity_map)
        return tuple(result) if origin is tuple else result

    def _dict_from_json(
        self, text: str, args: tuple, entity_map: Mapping[Any, int]
    ) -> dict:
        if len(args) != 2:
            raise TypeError("dict kind needs key and value types")
        key_kind, value_kind = args
        result = {}
        for raw_pair in parse_json_object(text).values():
            pair = parse_json_object(raw_pair)
            try:
                raw_key, raw_value = pair["0"], pair["1"]
            except KeyError:
                raise ValueError("dict entry is not a [key, value] pair") from None
            key = self._value_from_json(raw_key, key_kind, entity_map)
            result[key] = self._value_from_json(raw_value, value_kind, entity_map)
        return result