import numpy as np
import pytest

from quadruped.configuration import LEG_ORDER, LegFlags, LegName
from quadruped.motion.leg_positions import LegPositions
from quadruped.motion.rotations import Rotation, rotate_z
from quadruped.motion.vector import Vector3


@pytest.fixture
def stance(configuration) -> LegPositions:
    return LegPositions.from_stance(configuration)


def _assert_close(actual: Vector3, expected: Vector3, tolerance=1e-9):
    assert actual.distance(expected) <= tolerance, f"{actual} != {expected}"


def test_from_stance_uses_relaxed_positions(stance):
    assert stance.front_left == Vector3(-15.0, 15.0, -13.0)
    assert stance.front_right == Vector3(15.0, 15.0, -13.0)
    assert stance.rear_left == Vector3(-15.0, -15.0, -13.0)
    assert stance.rear_right == Vector3(15.0, -15.0, -13.0)


def test_get_set_and_items(stance):
    stance.set(LegName.REAR_LEFT, Vector3(1.0, 2.0, 3.0))

    assert stance.get(LegName.REAR_LEFT) == Vector3(1.0, 2.0, 3.0)
    assert stance.rear_left == Vector3(1.0, 2.0, 3.0)
    assert [name for name, _ in stance.items()] == list(LEG_ORDER)


def test_translate_all_legs(stance):
    stance.translate(Vector3(1.0, -2.0, 3.0))

    assert stance.front_left == Vector3(-14.0, 13.0, -10.0)
    assert stance.rear_right == Vector3(16.0, -17.0, -10.0)


def test_translate_only_selected_legs(stance, configuration):
    stance.translate(Vector3(0.0, 0.0, 4.0), LegFlags.FRONT_LEFT | LegFlags.REAR_RIGHT)

    assert stance.front_left == Vector3(-15.0, 15.0, -9.0)
    assert stance.rear_right == Vector3(15.0, -15.0, -9.0)
    assert stance.front_right == configuration.stance(LegName.FRONT_RIGHT)
    assert stance.rear_left == configuration.stance(LegName.REAR_LEFT)


def test_transforms_chain(stance):
    result = stance.translate(Vector3(0.0, 1.0, 0.0)).rotate(0.0)

    assert result is stance


def test_rotate_front_legs_counter_clockwise(stance, configuration):
    stance.rotate(90.0, LegFlags.FRONT)

    _assert_close(stance.front_left, Vector3(-15.0, -15.0, -13.0))
    _assert_close(stance.front_right, Vector3(-15.0, 15.0, -13.0))
    assert stance.rear_left == configuration.stance(LegName.REAR_LEFT)
    assert stance.rear_right == configuration.stance(LegName.REAR_RIGHT)


def test_rotate_center_yaw_matches_rotate(stance):
    rotated = stance.copy().rotate(25.0)

    stance.rotate_center(Rotation(yaw=25.0))

    for name in LEG_ORDER:
        _assert_close(stance.get(name), rotated.get(name))


def test_rotate_center_pitch_raises_front_feet(stance, configuration):
    stance.rotate_center(Rotation(pitch=10.0))

    assert stance.front_left.z > -13.0
    assert stance.front_right.z > -13.0
    assert stance.rear_left.z < -13.0
    assert stance.rear_right.z < -13.0
    for name in LEG_ORDER:
        assert stance.get(name).length() == pytest.approx(configuration.stance(name).length())


def test_rotate_center_roll_raises_one_side(stance):
    stance.rotate_center(Rotation(roll=10.0))

    assert stance.front_left.z == pytest.approx(stance.rear_left.z)
    assert stance.front_right.z == pytest.approx(stance.rear_right.z)
    assert stance.front_left.z != pytest.approx(stance.front_right.z)


def test_rotate_center_accepts_a_matrix(stance):
    expected = stance.copy().rotate(-30.0, LegFlags.LEFT)

    stance.rotate_center(rotate_z(np.radians(-30.0)), LegFlags.LEFT)

    for name in LEG_ORDER:
        _assert_close(stance.get(name), expected.get(name))


@pytest.mark.parametrize(
    'matrix',
    [
        np.eye(3) * 2.0,
        np.diag([1.0, 1.0, -1.0]),
        np.eye(2),
    ],
)
def test_rotate_center_rejects_non_rotations(stance, matrix):
    with pytest.raises(ValueError):
        stance.rotate_center(matrix)


def test_move_towards_finishes_in_exact_number_of_steps(stance):
    target = stance.copy().translate(Vector3(0.0, 10.0, 0.0))

    for step in range(1, 11):
        stance.move_towards(target, 1.0)
        assert stance.move_finished(target) is (step == 10)

    assert stance == target


def test_move_towards_moves_each_leg_independently(stance, configuration):
    target = stance.copy()
    target.translate(Vector3(0.0, 0.0, 3.0), LegFlags.FRONT_LEFT)
    target.translate(Vector3(0.0, 0.5, 0.0), LegFlags.REAR_RIGHT)

    stance.move_towards(target, 1.0)

    assert stance.front_left == Vector3(-15.0, 15.0, -12.0)
    assert stance.rear_right == target.rear_right
    assert stance.front_right == configuration.stance(LegName.FRONT_RIGHT)
    assert not stance.move_finished(target)


def test_move_finished_with_tolerance(stance):
    nearly = stance.copy().translate(Vector3(1e-9, 0.0, 0.0))

    assert not stance.move_finished(nearly)
    assert stance.move_finished(nearly, tolerance=1e-6)


def test_copy_is_independent(stance, configuration):
    duplicate = stance.copy()

    duplicate.translate(Vector3(5.0, 5.0, 5.0))

    assert stance == LegPositions.from_stance(configuration)
    assert duplicate != stance


def test_str_lists_every_leg(stance):
    text = str(stance)

    assert text.startswith('FrontLeft [-15.000; 15.000; -13.000]')
    assert 'RearRight [15.000; -15.000; -13.000]' in text
