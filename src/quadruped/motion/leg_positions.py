"""
This module defines the LegPositions class holding the foot targets of the four legs.
"""

from dataclasses import dataclass, field
from typing import Iterator, Tuple, Union

import numpy as np

from quadruped.configuration import LEG_ORDER, LegFlags, LegName, RobotConfiguration
from quadruped.motion.rotations import Rotation, is_rotation_matrix
from quadruped.motion.vector import Vector3


@dataclass
class LegPositions:
    """The positions of the 4 feet in the body frame.

    Every transform takes a ``legs`` selector (defaults to all four) and leaves the
    legs outside it untouched. Transforms change the instance in place and return it,
    so they can be chained.

    Attributes:
        front_left: The position of the left front foot (Vector3).
        front_right: The position of the right front foot (Vector3).
        rear_left: The position of the left rear foot (Vector3).
        rear_right: The position of the right rear foot (Vector3).
    """

    front_left: Vector3 = field(default_factory=Vector3)
    front_right: Vector3 = field(default_factory=Vector3)
    rear_left: Vector3 = field(default_factory=Vector3)
    rear_right: Vector3 = field(default_factory=Vector3)

    @classmethod
    def from_stance(cls, configuration: RobotConfiguration) -> 'LegPositions':
        """The relaxed stance of ``configuration``."""
        return cls(*(configuration.stance(name) for name in LEG_ORDER))

    def get(self, leg: LegName) -> Vector3:
        return getattr(self, leg.value)

    def set(self, leg: LegName, position: Vector3) -> None:
        setattr(self, leg.value, position)

    def items(self) -> Iterator[Tuple[LegName, Vector3]]:
        for name in LEG_ORDER:
            yield name, self.get(name)

    def _selected(self, legs: LegFlags) -> Iterator[LegName]:
        return (name for name in LEG_ORDER if name.is_selected(legs))

    def translate(self, offset: Vector3, legs: LegFlags = LegFlags.ALL) -> 'LegPositions':
        """Add ``offset`` to every selected foot."""
        for name in self._selected(legs):
            self.set(name, self.get(name).add(offset))
        return self

    def rotate(self, angle: float, legs: LegFlags = LegFlags.ALL) -> 'LegPositions':
        """Turn every selected foot about the body's vertical axis by ``angle`` degrees.

        Counter-clockwise is positive; the height of each foot is kept.
        """
        for name in self._selected(legs):
            self.set(name, self.get(name).rotate_yaw(angle))
        return self

    def rotate_center(
        self, rotation: Union[Rotation, np.ndarray], legs: LegFlags = LegFlags.ALL
    ) -> 'LegPositions':
        """Rotate the selected feet about the body origin, as if the whole body pivoted.

        Args:
            rotation: A ``Rotation`` (yaw, pitch, roll in degrees) or a 3x3 rotation matrix.
            legs: Which legs to move.

        Raises:
            ValueError: If a matrix is given that is not a proper rotation.
        """
        if isinstance(rotation, Rotation):
            matrix = rotation.to_matrix()
        else:
            matrix = np.asarray(rotation, dtype=float)
            if not is_rotation_matrix(matrix):
                raise ValueError(f"Not a 3x3 rotation matrix: {matrix!r}")

        for name in self._selected(legs):
            self.set(name, Vector3.from_sequence(matrix @ self.get(name).to_array()))
        return self

    def move_towards(self, target: 'LegPositions', max_distance: float) -> 'LegPositions':
        """Step each foot towards its position in ``target`` by at most ``max_distance``.

        Legs move independently and stop exactly on their target once within reach.
        """
        for name in LEG_ORDER:
            self.set(name, self.get(name).move_towards(target.get(name), max_distance))
        return self

    def move_finished(self, other: 'LegPositions', tolerance: float = 0.0) -> bool:
        """True when every foot is at its position in ``other``.

        With the default tolerance of zero this is exact equality; pass a tolerance (cm)
        to accept positions that are only within float round-off of each other.
        """
        if tolerance <= 0.0:
            return all(self.get(name) == other.get(name) for name in LEG_ORDER)
        return all(self.get(name).similar(other.get(name), tolerance) for name in LEG_ORDER)

    def copy(self) -> 'LegPositions':
        # Vector3 is immutable, so copying the references shares no mutable state
        return LegPositions(self.front_left, self.front_right, self.rear_left, self.rear_right)

    def __str__(self) -> str:
        return (
            f"FrontLeft {self.front_left} FrontRight {self.front_right} "
            f"RearLeft {self.rear_left} RearRight {self.rear_right}"
        )
