"""
Vector primitives for foot positions in the body frame.

Coordinates are in centimeters. The body frame has +X to the right, +Y forward
and +Z up. Angles are in degrees and a positive angle turns counter-clockwise
when looking down on the robot.
"""

from dataclasses import dataclass
import math
from typing import Iterator, Sequence

import numpy as np


@dataclass(frozen=True)
class Vector2:
    """A planar vector, used for headings and remote-control direction."""

    x: float = 0.0
    y: float = 0.0

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def rotate(self, angle: float) -> 'Vector2':
        """Rotate counter-clockwise by ``angle`` degrees."""
        radians = math.radians(angle)
        cos_a = math.cos(radians)
        sin_a = math.sin(radians)
        return Vector2(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))

    def __str__(self) -> str:
        return f"[{self.x:.3f}; {self.y:.3f}]"


@dataclass(frozen=True)
class Vector3:
    """A point or direction in the body frame.

    Equality (``==``) is exact; use :meth:`similar` for a tolerance based comparison.

    Attributes:
        x: The value in the X direction (float).
        y: The value in the Y direction (float).
        z: The value in the Z direction (float).
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @staticmethod
    def from_sequence(values: Sequence[float]) -> 'Vector3':
        """Build a vector from any three element sequence (list, tuple, numpy array)."""
        if len(values) != 3:
            raise ValueError(f"Expected 3 values, got {len(values)}")
        return Vector3(float(values[0]), float(values[1]), float(values[2]))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    def add(self, other: 'Vector3') -> 'Vector3':
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: 'Vector3') -> 'Vector3':
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, multiplier: float) -> 'Vector3':
        return Vector3(self.x * multiplier, self.y * multiplier, self.z * multiplier)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normal(self) -> 'Vector3':
        """Unit vector in the same direction.

        Undefined for the zero vector; the result is NaN there, callers must not normalize it.
        """
        length = self.length()
        if length == 0.0:
            return Vector3(math.nan, math.nan, math.nan)
        return Vector3(self.x / length, self.y / length, self.z / length)

    def distance(self, other: 'Vector3') -> float:
        return distance(self, other)

    def similar(self, other: 'Vector3', epsilon: float = 0.0) -> bool:
        return similar(self, other, epsilon)

    def horizontal(self) -> Vector2:
        """Projection onto the X/Y plane."""
        return Vector2(self.x, self.y)

    def rotate_yaw(self, angle: float) -> 'Vector3':
        """Rotate the X/Y projection about the vertical axis by ``angle`` degrees, keeping Z."""
        rotated = self.horizontal().rotate(angle)
        return Vector3(rotated.x, rotated.y, self.z)

    def move_towards(self, target: 'Vector3', max_distance: float) -> 'Vector3':
        """Move towards ``target`` by at most ``max_distance``.

        Returns ``target`` itself once it is within reach, so repeated calls end exactly on it.
        A remaining distance that only differs from the step by float round-off counts as reached.
        """
        if max_distance <= 0.0:
            return self

        remaining = self.distance(target)
        if remaining <= max_distance or math.isclose(remaining, max_distance):
            return target

        return self.add(target.subtract(self).scale(max_distance / remaining))

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __str__(self) -> str:
        return f"[{self.x:.3f}; {self.y:.3f}; {self.z:.3f}]"


def distance(a: Vector3, b: Vector3) -> float:
    """Euclidean distance between two points."""
    dx = a.x - b.x
    dy = a.y - b.y
    dz = a.z - b.z
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def similar(a: Vector3, b: Vector3, epsilon: float = 0.0) -> bool:
    """True when the two points are at most ``epsilon`` apart (exact match by default)."""
    return distance(a, b) <= epsilon


__all__ = ['Vector2', 'Vector3', 'distance', 'similar']
