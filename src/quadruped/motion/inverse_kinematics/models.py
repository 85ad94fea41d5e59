from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class JointAngles:
    """Anatomical joint angles (degrees) for one leg.

    Attributes:
        coxa: Bearing of the foot around the hip, relative to the leg heading.
        femur: Angle of the upper leg measured from straight down.
        tibia: Interior knee angle between upper and lower leg.
    """

    coxa: float
    femur: float
    tibia: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.coxa, self.femur, self.tibia))


@dataclass(frozen=True)
class LegGoalPositions:
    """Goal positions for the three motors of one leg, in actuator degrees."""

    coxa: float
    femur: float
    tibia: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.coxa, self.femur, self.tibia))
