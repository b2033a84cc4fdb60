"""Minimal 2-D vector type used by the physics code."""

import math
from typing import NamedTuple

import numpy as np


class Vector2(NamedTuple):
    """Immutable 2-D vector of floats."""

    x: float
    y: float

    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0.0, 0.0)

    @classmethod
    def of(cls, value) -> "Vector2":
        """Coerce ``value`` (a Vector2 or any 2-sequence) to a Vector2."""
        if isinstance(value, Vector2):
            return value
        x, y = value
        return cls(float(x), float(y))

    def __add__(self, other):
        return add(self, other)

    def __sub__(self, other):
        return sub(self, other)

    def __mul__(self, k):
        return scale(self, k)

    __rmul__ = __mul__

    def __truediv__(self, k):
        return divide(self, k)

    def __neg__(self):
        return Vector2(-self.x, -self.y)

    def magnitude(self) -> float:
        return magnitude(self)

    def normalize(self) -> "Vector2":
        return normalize(self)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)


def add(a: Vector2, b: Vector2) -> Vector2:
    return Vector2(a.x + b.x, a.y + b.y)


def sub(a: Vector2, b: Vector2) -> Vector2:
    return Vector2(a.x - b.x, a.y - b.y)


def scale(a: Vector2, k: float) -> Vector2:
    return Vector2(a.x * k, a.y * k)


def divide(a: Vector2, k: float) -> Vector2:
    """Divide component-wise by ``k``. ``k`` must be non-zero."""
    return Vector2(a.x / k, a.y / k)


def magnitude(a: Vector2) -> float:
    return math.sqrt(a.x * a.x + a.y * a.y)


def normalize(a: Vector2) -> Vector2:
    """Return the unit vector along ``a``.

    A vector of exactly zero length is returned unchanged so coincident bodies
    produce a zero direction instead of NaN.
    """
    mag = magnitude(a)
    if mag == 0.0:
        return a
    return divide(a, mag)
