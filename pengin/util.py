"""Rectangles, random numbers and simple overlap tests."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Union

Number = Union[int, float]

EPSILON = 0.001


@dataclass(order=True)
class Rect:
    """An axis-aligned rectangle; ordered field by field (x, y, width, height)."""

    x: Number = 0
    y: Number = 0
    width: Number = 0
    height: Number = 0

    def converted(self, kind: Callable[[Number], Number]) -> "Rect":
        """Return a copy with every field passed through ``kind`` (e.g. ``int``)."""
        return Rect(kind(self.x), kind(self.y), kind(self.width), kind(self.height))

    def __bool__(self) -> bool:
        """A rectangle is truthy unless every field is zero."""
        return self != Rect()

    def _values(self) -> tuple:
        return (self.x, self.y, self.width, self.height)


def random_number(low: Number, high: Number) -> Number:
    """Return a random integer in [low, high], or a random float between them."""
    if isinstance(low, int) and isinstance(high, int):
        return random.randint(low, high)
    return random.uniform(low, high)


def _uses_floats(*values: Number) -> bool:
    return any(isinstance(value, float) for value in values)


def is_point_in_rect(rect: Rect, px: Number, py: Number) -> bool:
    """Whether the point lies strictly inside ``rect``, with a tolerance for floats."""
    if _uses_floats(*rect._values(), px, py):
        eps = EPSILON
        return not (
            px + eps <= rect.x
            or px >= rect.x + rect.width + eps
            or py + eps <= rect.y
            or py >= rect.y + rect.height + eps
        )
    return not (
        px <= rect.x
        or px >= rect.x + rect.width
        or py <= rect.y
        or py >= rect.y + rect.height
    )


def is_colliding_aabb(rect1: Rect, rect2: Rect) -> bool:
    """Whether two rectangles overlap, with a tolerance for floats."""
    if _uses_floats(*rect1._values(), *rect2._values()):
        eps = EPSILON
        return not (
            rect1.x + rect1.width + eps <= rect2.x
            or rect2.x + rect2.width + eps <= rect1.x
            or rect1.y + rect1.height + eps <= rect2.y
            or rect2.y + rect2.height + eps <= rect1.y
        )
    return not (
        rect1.x + rect1.width <= rect2.x
        or rect2.x + rect2.width <= rect1.x
        or rect1.y + rect1.height <= rect2.y
        or rect2.y + rect2.height <= rect1.y
    )