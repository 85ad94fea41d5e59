"""
Contract of the actuator driver used by the kinematics driver.

The concrete serial implementation talks to the motors over a point-to-point link; it is
not part of this package. Anything that implements these methods can be plugged in.
"""

from abc import ABC, abstractmethod

from quadruped.hardware.actuator._compliance_slope import ComplianceSlope


class ActuatorDriver(ABC):
    """Per-motor write access to the robot's actuators.

    Writes are fire-and-forget: no method waits for the motor to settle and none retries.
    """

    @abstractmethod
    def set_goal_position_in_degrees(self, motor_id: int, angle: float) -> None:
        """Command ``motor_id`` to ``angle`` in the actuator's own degree space."""

    @abstractmethod
    def set_torque(self, motor_id: int, enabled: bool) -> None:
        """Enable or disable holding torque."""

    @abstractmethod
    def set_compliance_slope(self, motor_id: int, slope: ComplianceSlope) -> None:
        """Set how softly the motor approaches its goal."""

    @abstractmethod
    def set_moving_speed(self, motor_id: int, speed: int) -> None:
        """Set the speed the motor moves towards its goal with."""

    def close(self) -> None:
        """Release the underlying link. Nothing to release by default."""

    def __enter__(self) -> 'ActuatorDriver':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
