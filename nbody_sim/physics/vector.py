"""Immutable 2D vector value type."""

from dataclasses import dataclass
from typing import Iterator, Union
import math
import numpy as np


@dataclass(frozen=True)
class Vector2:
    """2D floating-point vector.

    All arithmetic returns new instances; a Vector2 is never mutated.
    Multiplication accepts either a scalar or another Vector2 (component-wise).
    """
    x: float
    y: float

    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0.0, 0.0)

    @classmethod
    def unit(cls) -> "Vector2":
        """Return (1, 1)."""
        return cls(1.0, 1.0)

    def distance(self, other: "Vector2") -> float:
        """Euclidean distance to another point."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union["Vector2", float]) -> "Vector2":
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        return Vector2(self.x * other, self.y * other)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector2":
        return Vector2(self.x / scalar, self.y / scalar)
