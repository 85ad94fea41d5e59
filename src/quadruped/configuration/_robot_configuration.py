from collections import Counter
from dataclasses import dataclass
from typing import Dict, Tuple

from quadruped import constants, labels
from quadruped.configuration._leg_configuration import ActuatorLimits, LegConfiguration, LinkLengths
from quadruped.configuration._leg_name import LEG_ORDER, LegName
from quadruped.errors import ConfigurationError
from quadruped.hardware.actuator._compliance_slope import ComplianceSlope
from quadruped.motion.vector import Vector3


@dataclass(frozen=True)
class RobotConfiguration:
    """Immutable description of the whole robot, built once at start-up.

    The leg table is validated on construction, an instance with a missing leg or a
    repeated motor id cannot exist.

    Attributes:
        legs: The four leg configurations, any order.
        link_lengths: Coxa, femur and tibia lengths (cm).
        actuator_limits: Travel of every actuator in degrees.
        relaxed_stance: Foot positions of the start-up pose, in ``LEG_ORDER``.
        compliance_slope: Compliance slope written to every motor on setup.
        moving_speed: Moving speed written to every motor on setup.
        frame_rate_hz: Control loop tick rate.
        max_step: Maximum distance a foot moves in one tick (cm).
    """

    legs: Tuple[LegConfiguration, ...]
    link_lengths: LinkLengths
    actuator_limits: ActuatorLimits
    relaxed_stance: Tuple[Vector3, Vector3, Vector3, Vector3]
    compliance_slope: int = constants.DEFAULT_COMPLIANCE_SLOPE
    moving_speed: int = constants.DEFAULT_MOVING_SPEED
    frame_rate_hz: float = constants.FRAME_RATE_HZ
    max_step: float = constants.DEFAULT_MAX_STEP

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check the leg table and the scalar parameters.

        Raises:
            ConfigurationError: On a missing or duplicated leg, a motor id used twice,
                a non positive link length, an empty actuator range, a non positive step,
                frame rate or moving speed, or a compliance slope the actuators do not support.
        """
        leg_counts = Counter(leg.name for leg in self.legs)
        for name in LEG_ORDER:
            if leg_counts[name] == 0:
                raise ConfigurationError(labels.ERR_CONFIG_MISSING_LEG.format(leg=name.value))
            if leg_counts[name] > 1:
                raise ConfigurationError(labels.ERR_CONFIG_DUPLICATE_LEG.format(leg=name.value))

        motor_counts = Counter(motor_id for leg in self.legs for motor_id in leg.motor_ids)
        for motor_id, count in sorted(motor_counts.items()):
            if count > 1:
                raise ConfigurationError(labels.ERR_CONFIG_DUPLICATE_MOTOR.format(motor_id=motor_id))

        for link_name in ('coxa', 'femur', 'tibia'):
            value = getattr(self.link_lengths, link_name)
            if value <= 0:
                raise ConfigurationError(labels.ERR_CONFIG_INVALID_LINK_LENGTH.format(name=link_name, value=value))

        limits = self.actuator_limits
        if not limits.min_angle < limits.max_angle or not limits.contains(limits.center):
            raise ConfigurationError(
                labels.ERR_CONFIG_INVALID_LIMITS.format(min_angle=limits.min_angle, max_angle=limits.max_angle)
            )

        if len(self.relaxed_stance) != len(LEG_ORDER):
            raise ConfigurationError(labels.ERR_CONFIG_MISSING_LEG.format(leg='relaxed stance'))

        if self.max_step <= 0:
            raise ConfigurationError(labels.ERR_CONFIG_INVALID_STEP.format(value=self.max_step))

        if self.frame_rate_hz <= 0:
            raise ConfigurationError(labels.ERR_CONFIG_INVALID_FRAME_RATE.format(value=self.frame_rate_hz))

        supported = [slope.value for slope in ComplianceSlope]
        if self.compliance_slope not in supported:
            raise ConfigurationError(
                labels.ERR_CONFIG_INVALID_COMPLIANCE_SLOPE.format(value=self.compliance_slope, supported=supported)
            )

        if self.moving_speed <= 0:
            raise ConfigurationError(labels.ERR_CONFIG_INVALID_MOVING_SPEED.format(value=self.moving_speed))

    def leg(self, name: LegName) -> LegConfiguration:
        for leg in self.legs:
            if leg.name == name:
                return leg
        raise ConfigurationError(labels.ERR_CONFIG_MISSING_LEG.format(leg=name.value))

    def ordered_legs(self) -> Tuple[LegConfiguration, ...]:
        """The four legs in front-left, front-right, rear-left, rear-right order."""
        return tuple(self.leg(name) for name in LEG_ORDER)

    def stance(self, name: LegName) -> Vector3:
        return self.relaxed_stance[LEG_ORDER.index(name)]

    @property
    def coxa_ids(self) -> Tuple[int, ...]:
        return tuple(leg.coxa_id for leg in self.ordered_legs())

    @property
    def femur_ids(self) -> Tuple[int, ...]:
        return tuple(leg.femur_id for leg in self.ordered_legs())

    @property
    def tibia_ids(self) -> Tuple[int, ...]:
        return tuple(leg.tibia_id for leg in self.ordered_legs())

    @property
    def motor_ids(self) -> Tuple[int, ...]:
        """All twelve motors, grouped by joint type (coxas, then femurs, then tibias)."""
        return self.coxa_ids + self.femur_ids + self.tibia_ids

    @property
    def frame_duration(self) -> float:
        return 1.0 / self.frame_rate_hz

    @classmethod
    def defaults(cls) -> 'RobotConfiguration':
        """The leg table of the reference robot."""
        # Correction numbers are set up so that adding them to the solved angle points the motor
        # center at it; the link offsets then compensate for the shape of the legs.
        front_left = LegConfiguration(
            LegName.FRONT_LEFT, 1, 3, 5, 45, Vector3(-6.5, 6.5, 0.0),
            -240 + constants.FEMUR_OFFSET, -330 + constants.TIBIA_OFFSET,
        )
        front_right = LegConfiguration(
            LegName.FRONT_RIGHT, 2, 4, 6, -45, Vector3(6.5, 6.5, 0.0),
            60 + constants.FEMUR_OFFSET, -30 + constants.TIBIA_OFFSET,
        )
        rear_left = LegConfiguration(
            LegName.REAR_LEFT, 7, 9, 11, 135, Vector3(-6.5, -6.5, 0.0),
            60 + constants.FEMUR_OFFSET, -30 + constants.TIBIA_OFFSET,
        )
        rear_right = LegConfiguration(
            LegName.REAR_RIGHT, 8, 10, 12, -135, Vector3(6.5, -6.5, 0.0),
            -240 + constants.FEMUR_OFFSET, -330 + constants.TIBIA_OFFSET,
        )

        return cls(
            legs=(front_left, front_right, rear_left, rear_right),
            link_lengths=LinkLengths(constants.COXA_LENGTH, constants.FEMUR_LENGTH, constants.TIBIA_LENGTH),
            actuator_limits=ActuatorLimits(
                constants.ACTUATOR_MIN_ANGLE, constants.ACTUATOR_MAX_ANGLE, constants.ACTUATOR_CENTER_ANGLE
            ),
            relaxed_stance=(
                Vector3(-15.0, 15.0, -13.0),
                Vector3(15.0, 15.0, -13.0),
                Vector3(-15.0, -15.0, -13.0),
                Vector3(15.0, -15.0, -13.0),
            ),
        )

    def as_dict(self) -> Dict[str, object]:
        """Plain dictionary in the layout of the JSON configuration file."""
        return {
            'kinematics': {
                'coxa_length': self.link_lengths.coxa,
                'femur_length': self.link_lengths.femur,
                'tibia_length': self.link_lengths.tibia,
            },
            'actuators': {
                'min_angle': self.actuator_limits.min_angle,
                'max_angle': self.actuator_limits.max_angle,
                'center_angle': self.actuator_limits.center,
                'compliance_slope': self.compliance_slope,
                'moving_speed': self.moving_speed,
            },
            'motion': {
                'frame_rate_hz': self.frame_rate_hz,
                'max_step': self.max_step,
            },
            'legs': {
                leg.name.value: {
                    'coxa_id': leg.coxa_id,
                    'femur_id': leg.femur_id,
                    'tibia_id': leg.tibia_id,
                    'angle_offset': leg.angle_offset,
                    'coxa_position': list(leg.coxa_position),
                    'femur_correction': leg.femur_correction,
                    'tibia_correction': leg.tibia_correction,
                }
                for leg in self.ordered_legs()
            },
            'stance': {
                'relaxed': {name.value: list(self.stance(name)) for name in LEG_ORDER},
            },
        }
