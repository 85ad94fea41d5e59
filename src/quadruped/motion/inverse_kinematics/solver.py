"""
Quadruped leg kinematics.

Computes the coxa, femur and tibia angles that put one foot at a target point in the
body frame, and the forward kinematics that takes those angles back to a foot position.
"""

import math
from typing import TYPE_CHECKING, Dict, Optional

from quadruped import labels
from quadruped.configuration import (
    LEG_ORDER,
    ActuatorLimits,
    LegConfiguration,
    LegName,
    LinkLengths,
    RobotConfiguration,
)
from quadruped.errors import JointLimitError, UnreachableDirectionError, UnreachableDistanceError
from quadruped.motion.inverse_kinematics.models import JointAngles, LegGoalPositions
from quadruped.motion.vector import Vector3

if TYPE_CHECKING:
    from quadruped.motion.leg_positions import LegPositions

# Bearings at or beyond this many degrees from the leg heading are behind the leg
MAX_TARGET_ANGLE = 90.0


def _angle_by_a(a: float, b: float, c: float) -> float:
    """Angle (degrees) opposite side ``a`` of the triangle with sides a, b, c (law of cosines).

    The caller guarantees the triangle exists; the cosine is clamped only against round-off.
    """
    cos_a = (b * b + c * c - a * a) / (2.0 * b * c)
    cos_a = max(-1.0, min(1.0, cos_a))
    return math.degrees(math.acos(cos_a))


class InverseKinematicsSolver:
    """Inverse kinematics solver for one 3-DOF leg.

    The solver is stateless; it only holds the link lengths shared by all legs and the
    actuator travel used to validate results. Each call takes the leg configuration, so
    one solver serves all four legs and may be called from several threads.

    Coordinate system (body frame, cm):
      +X = right
      +Y = forward
      +Z = up
    """

    def __init__(self, link_lengths: LinkLengths, actuator_limits: ActuatorLimits):
        self._link_lengths = link_lengths
        self._actuator_limits = actuator_limits

    @classmethod
    def from_configuration(cls, configuration: RobotConfiguration) -> 'InverseKinematicsSolver':
        return cls(configuration.link_lengths, configuration.actuator_limits)

    @property
    def link_lengths(self) -> LinkLengths:
        return self._link_lengths

    @property
    def actuator_limits(self) -> ActuatorLimits:
        return self._actuator_limits

    def solve_joint_angles(self, target: Vector3, leg: LegConfiguration) -> JointAngles:
        """Compute the anatomical joint angles that put the foot of ``leg`` at ``target``.

        Args:
            target: Foot position in the body frame.
            leg: Configuration of the leg to solve for.

        Returns:
            JointAngles in degrees.

        Raises:
            UnreachableDirectionError: If the target bearing is 90 degrees or more off the leg heading.
            UnreachableDistanceError: If the femur/tibia pair cannot span the distance to the target.
        """
        relative = target.subtract(leg.coxa_position)

        target_angle = math.degrees(math.atan2(relative.x, relative.y)) + leg.angle_offset
        # keep the bearing in (-180, 180] so rear legs do not wrap across the seam
        if target_angle > 180.0:
            target_angle -= 360.0
        elif target_angle <= -180.0:
            target_angle += 360.0

        if target_angle >= MAX_TARGET_ANGLE or target_angle <= -MAX_TARGET_ANGLE:
            # target is behind the leg, this also happens right below the hip
            raise UnreachableDirectionError(
                labels.ERR_IK_UNREACHABLE_DIRECTION.format(angle=target_angle, target=target),
                target=target,
                leg=leg,
                angle=target_angle,
            )

        links = self._link_lengths
        horizontal_distance = math.hypot(relative.x, relative.y)
        horizontal_without_coxa = horizontal_distance - links.coxa
        reach = math.hypot(horizontal_without_coxa, relative.z)

        if not links.min_reach <= reach <= links.max_reach:
            raise UnreachableDistanceError(
                labels.ERR_IK_UNREACHABLE_DISTANCE.format(
                    target=target, reach=reach, min_reach=links.min_reach, max_reach=links.max_reach
                ),
                target=target,
                leg=leg,
                reach=reach,
            )

        # SSS triangle femur / tibia / reach: the interior angles at the knee and at the femur joint
        angle_by_tibia = _angle_by_a(reach, links.femur, links.tibia)
        angle_by_femur = _angle_by_a(links.tibia, links.femur, reach)

        ground_to_target_angle = math.degrees(math.atan2(horizontal_without_coxa, -relative.z))

        return JointAngles(
            coxa=target_angle,
            femur=angle_by_femur + ground_to_target_angle,
            tibia=angle_by_tibia,
        )

    def to_goal_positions(self, angles: JointAngles, leg: LegConfiguration) -> LegGoalPositions:
        """Map anatomical angles onto the actuator degrees of ``leg``."""
        return LegGoalPositions(
            coxa=self._actuator_limits.center - angles.coxa,
            femur=abs(leg.femur_correction + angles.femur),
            tibia=abs(leg.tibia_correction + angles.tibia),
        )

    def validate(self, goal: LegGoalPositions, leg: LegConfiguration, target: Optional[Vector3] = None) -> None:
        """Check that every goal position is finite and inside the actuator travel.

        Raises:
            JointLimitError: Naming the first joint out of range.
        """
        limits = self._actuator_limits
        for joint, angle in (('coxa', goal.coxa), ('femur', goal.femur), ('tibia', goal.tibia)):
            if not math.isfinite(angle) or not limits.contains(angle):
                raise JointLimitError(
                    labels.ERR_IK_JOINT_LIMIT.format(
                        joint=joint,
                        angle=angle,
                        target=target,
                        min_angle=limits.min_angle,
                        max_angle=limits.max_angle,
                    ),
                    target=target,
                    leg=leg,
                    joint=joint,
                )

    def solve(self, target: Vector3, leg: LegConfiguration) -> LegGoalPositions:
        """Solve one leg all the way to validated actuator goal positions.

        Raises:
            UnreachableDirectionError, UnreachableDistanceError, JointLimitError
        """
        goal = self.to_goal_positions(self.solve_joint_angles(target, leg), leg)
        self.validate(goal, leg, target)
        return goal

    def solve_all(
        self, positions: 'LegPositions', configuration: RobotConfiguration
    ) -> Dict[LegName, LegGoalPositions]:
        """Solve all four legs of a ``LegPositions``; the first failure propagates.

        Nothing is returned for any leg unless every leg solves, so callers can keep the
        previous pose as a whole.
        """
        return {name: self.solve(positions.get(name), configuration.leg(name)) for name in LEG_ORDER}

    def forward_kinematics(self, angles: JointAngles, leg: LegConfiguration) -> Vector3:
        """Foot position in the body frame for the given anatomical angles.

        Inverse of :meth:`solve_joint_angles`.
        """
        links = self._link_lengths
        femur = math.radians(angles.femur)
        knee = math.radians(angles.femur + angles.tibia)

        # leg plane: outward distance from the femur joint and height below it
        outward = links.femur * math.sin(femur) - links.tibia * math.sin(knee)
        height = -links.femur * math.cos(femur) + links.tibia * math.cos(knee)

        horizontal_distance = outward + links.coxa
        bearing = math.radians(angles.coxa - leg.angle_offset)
        relative = Vector3(
            horizontal_distance * math.sin(bearing),
            horizontal_distance * math.cos(bearing),
            height,
        )
        return leg.coxa_position.add(relative)


def solve(
    target: Vector3,
    leg: LegConfiguration,
    link_lengths: Optional[LinkLengths] = None,
    actuator_limits: Optional[ActuatorLimits] = None,
) -> LegGoalPositions:
    """Solve one leg with the reference robot's link lengths and actuator limits unless given."""
    if link_lengths is None or actuator_limits is None:
        defaults = RobotConfiguration.defaults()
        link_lengths = link_lengths or defaults.link_lengths
        actuator_limits = actuator_limits or defaults.actuator_limits
    return InverseKinematicsSolver(link_lengths, actuator_limits).solve(target, leg)
