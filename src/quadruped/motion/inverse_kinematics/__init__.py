from .models import JointAngles, LegGoalPositions
from .solver import InverseKinematicsSolver, solve

__all__ = ["InverseKinematicsSolver", "JointAngles", "LegGoalPositions", "solve"]
