from typing import Dict, List, Tuple

import pytest

from quadruped.configuration import RobotConfiguration
from quadruped.hardware.actuator import ActuatorDriver, ComplianceSlope
from quadruped.motion.inverse_kinematics import InverseKinematicsSolver


class RecordingActuatorDriver(ActuatorDriver):
    """In-memory actuator driver that records every write."""

    def __init__(self):
        self.goal_positions: Dict[int, float] = {}
        self.goal_writes: List[Tuple[int, float]] = []
        self.torque: Dict[int, bool] = {}
        self.compliance_slopes: Dict[int, ComplianceSlope] = {}
        self.moving_speeds: Dict[int, int] = {}
        self.closed = False

    def set_goal_position_in_degrees(self, motor_id: int, angle: float) -> None:
        self.goal_positions[motor_id] = angle
        self.goal_writes.append((motor_id, angle))

    def set_torque(self, motor_id: int, enabled: bool) -> None:
        self.torque[motor_id] = enabled

    def set_compliance_slope(self, motor_id: int, slope: ComplianceSlope) -> None:
        self.compliance_slopes[motor_id] = slope

    def set_moving_speed(self, motor_id: int, speed: int) -> None:
        self.moving_speeds[motor_id] = speed

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def configuration() -> RobotConfiguration:
    return RobotConfiguration.defaults()


@pytest.fixture
def solver(configuration) -> InverseKinematicsSolver:
    return InverseKinematicsSolver.from_configuration(configuration)


@pytest.fixture
def actuator_driver() -> RecordingActuatorDriver:
    return RecordingActuatorDriver()
