"""
Kinematics driver for the quadruped.
Turns foot positions into goal positions for the twelve motors and writes them through an ActuatorDriver.
"""

import threading
from typing import Dict, Optional

from quadruped import labels
from quadruped.configuration import LEG_ORDER, LegConfiguration, LegName, RobotConfiguration
from quadruped.hardware.actuator import ActuatorDriver, ComplianceSlope
from quadruped.logger import Logger
from quadruped.motion.inverse_kinematics import InverseKinematicsSolver, LegGoalPositions
from quadruped.motion.leg_positions import LegPositions
from quadruped.motion.vector import Vector3

log = Logger().setup_logger('IK driver')


class QuadrupedIkDriver:
    """Solves leg targets and forwards the resulting goal positions to the actuators.

    Solver failures propagate to the caller unchanged; nothing is written for a leg that
    did not solve.
    """

    def __init__(self, driver: ActuatorDriver, configuration: Optional[RobotConfiguration] = None):
        self._driver = driver
        self._configuration = configuration or RobotConfiguration.defaults()
        self._solver = InverseKinematicsSolver.from_configuration(self._configuration)
        # serializes motor writes so disable_motors can run from another thread mid-tick
        self._write_lock = threading.Lock()

    @property
    def configuration(self) -> RobotConfiguration:
        return self._configuration

    @property
    def solver(self) -> InverseKinematicsSolver:
        return self._solver

    def setup(self) -> None:
        """Write compliance slope and moving speed to every motor, coxas first, then femurs, then tibias."""
        slope = ComplianceSlope.from_value(self._configuration.compliance_slope)
        speed = self._configuration.moving_speed
        motor_ids = self._configuration.motor_ids

        log.info(labels.DRIVER_SETUP.format(slope.name, speed, len(motor_ids)))
        with self._write_lock:
            for motor_id in motor_ids:
                self._driver.set_compliance_slope(motor_id, slope)
                self._driver.set_moving_speed(motor_id, speed)

    def relaxed_stance(self) -> None:
        """Move every leg to the configured relaxed stance."""
        self.move_legs(LegPositions.from_stance(self._configuration))

    def move_leg(self, target: Vector3, leg: LegConfiguration) -> LegGoalPositions:
        """Solve one leg and write its three goal positions.

        Raises:
            KinematicsError: If the target cannot be reached; nothing is written then.
        """
        goal = self._solver.solve(target, leg)
        with self._write_lock:
            self._write_goal(leg, goal)
        return goal

    def move_front_left_leg(self, target: Vector3) -> LegGoalPositions:
        return self.move_leg(target, self._configuration.leg(LegName.FRONT_LEFT))

    def move_front_right_leg(self, target: Vector3) -> LegGoalPositions:
        return self.move_leg(target, self._configuration.leg(LegName.FRONT_RIGHT))

    def move_rear_left_leg(self, target: Vector3) -> LegGoalPositions:
        return self.move_leg(target, self._configuration.leg(LegName.REAR_LEFT))

    def move_rear_right_leg(self, target: Vector3) -> LegGoalPositions:
        return self.move_leg(target, self._configuration.leg(LegName.REAR_RIGHT))

    def move_legs(self, positions: LegPositions) -> Dict[LegName, LegGoalPositions]:
        """Solve all four legs, then write them.

        All legs are solved before anything is written, so a failure on any leg leaves
        every motor at its previous goal.

        Raises:
            KinematicsError: From the first leg that does not solve.
        """
        goals = self._solver.solve_all(positions, self._configuration)
        with self._write_lock:
            for name in LEG_ORDER:
                self._write_goal(self._configuration.leg(name), goals[name])
        return goals

    def disable_motors(self) -> None:
        """Turn torque off on every motor."""
        motor_ids = self._configuration.motor_ids
        log.info(labels.DRIVER_DISABLE_MOTORS.format(len(motor_ids)))
        with self._write_lock:
            for motor_id in motor_ids:
                self._driver.set_torque(motor_id, False)

    def close(self) -> None:
        log.info(labels.DRIVER_CLOSING)
        self._driver.close()

    def __enter__(self) -> 'QuadrupedIkDriver':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def _write_goal(self, leg: LegConfiguration, goal: LegGoalPositions) -> None:
        log.debug(labels.DRIVER_MOVE_LEG.format(leg.motor_ids, goal))
        self._driver.set_goal_position_in_degrees(leg.coxa_id, goal.coxa)
        self._driver.set_goal_position_in_degrees(leg.femur_id, goal.femur)
        self._driver.set_goal_position_in_degrees(leg.tibia_id, goal.tibia)
