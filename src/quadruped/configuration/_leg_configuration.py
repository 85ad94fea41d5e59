from dataclasses import dataclass
from typing import Tuple

from quadruped.configuration._leg_name import LegName
from quadruped.motion.vector import Vector3


@dataclass(frozen=True)
class LegConfiguration:
    """Constants of one physical leg.

    Attributes:
        name: Which leg this is.
        coxa_id: Motor id of the hip joint.
        femur_id: Motor id of the upper leg joint.
        tibia_id: Motor id of the lower leg joint.
        angle_offset: Home heading of the leg around the body in degrees.
        coxa_position: Offset of the hip pivot from the body origin (cm).
        femur_correction: Degrees added to the solved femur angle to reach actuator space.
        tibia_correction: Degrees added to the solved tibia angle to reach actuator space.
    """

    name: LegName
    coxa_id: int
    femur_id: int
    tibia_id: int
    angle_offset: float
    coxa_position: Vector3
    femur_correction: float
    tibia_correction: float

    @property
    def motor_ids(self) -> Tuple[int, int, int]:
        return self.coxa_id, self.femur_id, self.tibia_id


@dataclass(frozen=True)
class LinkLengths:
    """Link lengths shared by all legs (cm)."""

    coxa: float
    femur: float
    tibia: float

    @property
    def max_reach(self) -> float:
        return self.femur + self.tibia

    @property
    def min_reach(self) -> float:
        return abs(self.femur - self.tibia)


@dataclass(frozen=True)
class ActuatorLimits:
    """Travel of one actuator in its own degree space."""

    min_angle: float
    max_angle: float
    center: float

    def contains(self, angle: float) -> bool:
        return self.min_angle <= angle <= self.max_angle
