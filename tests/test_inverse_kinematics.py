import inspect
import math

import pytest

from quadruped.configuration import LEG_ORDER, ActuatorLimits, LegName
from quadruped.errors import (
    JointLimitError,
    KinematicsError,
    UnreachableDirectionError,
    UnreachableDistanceError,
)
from quadruped.motion.inverse_kinematics import InverseKinematicsSolver, LegGoalPositions, solve
from quadruped.motion.leg_positions import LegPositions
from quadruped.motion.vector import Vector3


def _along_heading(leg, horizontal_distance, z, bearing=0.0):
    """Target at ``horizontal_distance`` from the hip, ``bearing`` degrees off the leg heading."""
    angle = math.radians(bearing - leg.angle_offset)
    return leg.coxa_position.add(
        Vector3(horizontal_distance * math.sin(angle), horizontal_distance * math.cos(angle), z)
    )


def _mirror(v: Vector3) -> Vector3:
    return Vector3(-v.x, v.y, v.z)


def test_front_left_relaxed_target_is_deterministic(solver, configuration):
    front_left = configuration.leg(LegName.FRONT_LEFT)
    target = Vector3(-15.0, 15.0, -13.0)

    first = solver.solve(target, front_left)
    second = solver.solve(target, front_left)

    assert first == second
    assert first.coxa == pytest.approx(150.0)
    assert all(math.isfinite(angle) for angle in first)


def test_relaxed_stance_solves_inside_actuator_travel(solver, configuration):
    goals = solver.solve_all(LegPositions.from_stance(configuration), configuration)

    assert list(goals) == list(LEG_ORDER)
    for goal in goals.values():
        assert isinstance(goal, LegGoalPositions)
        assert goal.coxa == pytest.approx(150.0)
        for angle in goal:
            assert configuration.actuator_limits.contains(angle)


@pytest.mark.parametrize('leg_name', LEG_ORDER)
def test_relaxed_stance_round_trip(solver, configuration, leg_name):
    leg = configuration.leg(leg_name)
    target = configuration.stance(leg_name)

    angles = solver.solve_joint_angles(target, leg)
    foot = solver.forward_kinematics(angles, leg)

    assert foot.distance(target) < 1e-3


@pytest.mark.parametrize(
    'horizontal_distance, z, bearing',
    [
        (12.0, -10.0, 0.0),
        (15.0, -8.0, 30.0),
        (9.0, -14.0, -60.0),
        (20.0, -3.0, 10.0),
        (3.0, -12.0, 5.0),
    ],
)
@pytest.mark.parametrize('leg_name', LEG_ORDER)
def test_round_trip_across_the_workspace(solver, configuration, leg_name, horizontal_distance, z, bearing):
    leg = configuration.leg(leg_name)
    target = _along_heading(leg, horizontal_distance, z, bearing)

    angles = solver.solve_joint_angles(target, leg)

    assert angles.coxa == pytest.approx(bearing)
    assert solver.forward_kinematics(angles, leg).distance(target) < 1e-3


@pytest.mark.parametrize(
    'left_name, right_name',
    [(LegName.FRONT_LEFT, LegName.FRONT_RIGHT), (LegName.REAR_LEFT, LegName.REAR_RIGHT)],
)
@pytest.mark.parametrize('offset', [Vector3(0.0, 0.0, 0.0), Vector3(2.0, 1.0, 1.5), Vector3(-1.0, -2.0, -1.0)])
def test_mirrored_targets_give_mirrored_angles(solver, configuration, left_name, right_name, offset):
    left = configuration.leg(left_name)
    right = configuration.leg(right_name)
    right_target = configuration.stance(right_name).add(offset)
    left_target = _mirror(right_target)

    left_angles = solver.solve_joint_angles(left_target, left)
    right_angles = solver.solve_joint_angles(right_target, right)
    assert left_angles.coxa == pytest.approx(-right_angles.coxa)
    assert left_angles.femur == pytest.approx(right_angles.femur)
    assert left_angles.tibia == pytest.approx(right_angles.tibia)

    # mirrored linkages put mirrored goals symmetric about the actuator center
    center = configuration.actuator_limits.center
    left_goal = solver.solve(left_target, left)
    right_goal = solver.solve(right_target, right)
    for left_angle, right_angle in zip(left_goal, right_goal):
        assert left_angle + right_angle == pytest.approx(2 * center)


def test_target_at_plus_90_degrees_is_rejected(solver, configuration):
    front_left = configuration.leg(LegName.FRONT_LEFT)
    # relative (5, 5) sits at atan2 = 45 degrees, plus the 45 degree heading
    target = front_left.coxa_position.add(Vector3(5.0, 5.0, -10.0))

    with pytest.raises(UnreachableDirectionError) as error:
        solver.solve(target, front_left)

    assert error.value.angle == pytest.approx(90.0)
    assert error.value.leg is front_left
    assert error.value.target == target


def test_target_at_minus_90_degrees_is_rejected(solver, configuration):
    front_right = configuration.leg(LegName.FRONT_RIGHT)
    target = front_right.coxa_position.add(Vector3(-5.0, 5.0, -10.0))

    with pytest.raises(UnreachableDirectionError):
        solver.solve(target, front_right)


def test_target_behind_the_leg_is_rejected(solver, configuration):
    rear_right = configuration.leg(LegName.REAR_RIGHT)
    target = _along_heading(rear_right, 12.0, -10.0, bearing=150.0)

    with pytest.raises(UnreachableDirectionError):
        solver.solve(target, rear_right)


@pytest.mark.parametrize('bearing', [89.999, -89.999])
def test_target_just_inside_the_hemisphere_solves(solver, configuration, bearing):
    front_left = configuration.leg(LegName.FRONT_LEFT)
    target = _along_heading(front_left, 12.0, -10.0, bearing)

    goal = solver.solve(target, front_left)

    assert goal.coxa == pytest.approx(150.0 - bearing)


def test_rear_legs_accept_targets_across_the_backward_seam(solver, configuration):
    rear_left = configuration.leg(LegName.REAR_LEFT)
    # bearing whose raw atan2 lands past 180 before the heading is added
    target = _along_heading(rear_left, 12.0, -10.0, bearing=-55.0)

    angles = solver.solve_joint_angles(target, rear_left)

    assert angles.coxa == pytest.approx(-55.0)


def test_target_just_inside_max_reach_solves_nearly_straight(solver, configuration):
    front_left = configuration.leg(LegName.FRONT_LEFT)
    links = configuration.link_lengths
    target = _along_heading(front_left, links.coxa + links.max_reach - 1e-3, 0.0)

    angles = solver.solve_joint_angles(target, front_left)
    goal = solver.solve(target, front_left)

    assert angles.tibia == pytest.approx(180.0, abs=2.0)
    assert goal.tibia == pytest.approx(abs(front_left.tibia_correction + 180.0), abs=2.0)


def test_target_beyond_max_reach_is_rejected(solver, configuration):
    front_left = configuration.leg(LegName.FRONT_LEFT)
    links = configuration.link_lengths
    target = _along_heading(front_left, links.coxa + links.max_reach + 1e-3, 0.0)

    with pytest.raises(UnreachableDistanceError) as error:
        solver.solve(target, front_left)

    assert error.value.reach == pytest.approx(links.max_reach + 1e-3)


def test_target_inside_min_reach_is_rejected(solver, configuration):
    front_left = configuration.leg(LegName.FRONT_LEFT)
    target = _along_heading(front_left, configuration.link_lengths.coxa + 3.0, -3.0)

    with pytest.raises(UnreachableDistanceError):
        solver.solve(target, front_left)


def test_goal_outside_actuator_travel_is_rejected(configuration):
    narrow = InverseKinematicsSolver(configuration.link_lengths, ActuatorLimits(100.0, 200.0, 150.0))
    front_left = configuration.leg(LegName.FRONT_LEFT)

    with pytest.raises(JointLimitError) as error:
        narrow.solve(configuration.stance(LegName.FRONT_LEFT), front_left)

    assert error.value.joint == 'tibia'


def test_kinematics_errors_are_value_errors(solver, configuration):
    front_left = configuration.leg(LegName.FRONT_LEFT)

    with pytest.raises(ValueError):
        solver.solve(Vector3(-100.0, 100.0, -13.0), front_left)
    assert issubclass(UnreachableDirectionError, KinematicsError)


def test_solve_all_propagates_the_first_failure(solver, configuration):
    positions = LegPositions.from_stance(configuration)
    positions.rear_right = Vector3(60.0, -60.0, -13.0)

    with pytest.raises(UnreachableDistanceError) as error:
        solver.solve_all(positions, configuration)

    assert error.value.leg.name == LegName.REAR_RIGHT


def test_module_level_solve_uses_reference_robot(solver, configuration):
    front_right = configuration.leg(LegName.FRONT_RIGHT)
    target = Vector3(14.0, 16.0, -12.0)

    assert solve(target, front_right) == solver.solve(target, front_right)


def test_solve_all_takes_leg_positions():
    parameter = inspect.signature(InverseKinematicsSolver.solve_all).parameters['positions']

    assert parameter.annotation == 'LegPositions'
