"""A sparse set: dense value storage addressed by arbitrary keys."""

from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterator, List, Tuple, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class SparseSet(Generic[K, V]):
    """Values kept contiguously in insertion order, removed by swapping with the last."""

    def __init__(self) -> None:
        self._index: Dict[K, int] = {}
        self._dense: List[V] = []
        self._keys: List[K] = []

    def __len__(self) -> int:
        return len(self._dense)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __getitem__(self, key: K) -> V:
        try:
            return self._dense[self._index[key]]
        except KeyError:
            raise KeyError(f"key {key!r} not found in sparse set") from None

    def __iter__(self) -> Iterator[V]:
        return iter(self._dense)

    def emplace(self, key: K, value: V) -> V:
        """Store ``value`` under ``key``; raises KeyError if the key is present."""
        if key in self._index:
            raise KeyError(f"key {key!r} already added")
        self._index[key] = len(self._dense)
        self._dense.append(value)
        self._keys.append(key)
        return value

    def remove(self, key: K) -> None:
        """Remove ``key``, moving the last value into its slot."""
        try:
            position = self._index.pop(key)
        except KeyError:
            raise KeyError(f"key {key!r} not found in sparse set") from None
        last_key = self._keys[-1]
        last_value = self._dense.pop()
        self._keys.pop()
        if position < len(self._dense):
            self._dense[position] = last_value
            self._keys[position] = last_key
            self._index[last_key] = position

    def clear(self) -> None:
        self._index.clear()
        self._dense.clear()
        self._keys.clear()

    def keys(self) -> List[K]:
        """Keys in dense order."""
        return list(self._keys)

    def values(self) -> List[V]:
        """Values in dense order."""
        return list(self._dense)

    def items(self) -> Iterator[Tuple[K, V]]:
        """(key, value) pairs in dense order."""
        return zip(list(self._keys), list(self._dense))

    def key_at(self, index: int) -> K:
        """The key stored at a dense position."""
        if not 0 <= index < len(self._keys):
            raise IndexError("index out of bounds")
        return self._keys[index]