import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

import jmespath  # http://jmespath.org/tutorial.html

from quadruped import constants, labels
from quadruped.configuration._dot_dict import DotDict
from quadruped.configuration._leg_configuration import ActuatorLimits, LegConfiguration, LinkLengths
from quadruped.configuration._leg_name import LEG_ORDER, LegName
from quadruped.configuration._robot_configuration import RobotConfiguration
from quadruped.errors import ConfigurationError
from quadruped.logger import Logger
from quadruped.motion.vector import Vector3

log = Logger().setup_logger('Configuration')

DEFAULT_CONFIG_PATH = Path(__file__).parent / constants.DEFAULT_CONFIGURATION_FILE_NAME


class ConfigProvider:
    """
    Loads the JSON configuration and turns it into a ``RobotConfiguration``.

    Usage examples:
        provider = ConfigProvider()

        # jmespath lookups
        speed = provider.get(ConfigProvider.ACTUATORS_MOVING_SPEED)
        coxa_id = provider.get('legs.front_left.coxa_id')

        # dot notation access
        tibia = provider.kinematics.tibia_length

        # the validated, immutable robot description
        robot = provider.get_robot_configuration()

    The file is picked in this order: the explicit ``config_path``, ``~/quadruped.json``,
    then the default file shipped with the package.
    """

    KINEMATICS_COXA_LENGTH = 'kinematics.coxa_length'
    KINEMATICS_FEMUR_LENGTH = 'kinematics.femur_length'
    KINEMATICS_TIBIA_LENGTH = 'kinematics.tibia_length'

    ACTUATORS_MIN_ANGLE = 'actuators.min_angle'
    ACTUATORS_MAX_ANGLE = 'actuators.max_angle'
    ACTUATORS_CENTER_ANGLE = 'actuators.center_angle'
    ACTUATORS_COMPLIANCE_SLOPE = 'actuators.compliance_slope'
    ACTUATORS_MOVING_SPEED = 'actuators.moving_speed'

    MOTION_FRAME_RATE_HZ = 'motion.frame_rate_hz'
    MOTION_MAX_STEP = 'motion.max_step'

    LEG = 'legs.{}'
    RELAXED_STANCE = 'stance.relaxed.{}'

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self._config_path = self._resolve_path(config_path)
        self._raw_data: Dict[str, Any] = {}
        self._config: Optional[DotDict] = None

        self.load_config()
        self.list_modules()

    @staticmethod
    def _resolve_path(config_path: Optional[Union[str, Path]]) -> Path:
        if config_path is not None:
            return Path(config_path)

        home_path = Path.home() / constants.CONFIGURATION_FILE_NAME
        if home_path.exists():
            return home_path
        return DEFAULT_CONFIG_PATH

    @property
    def config_path(self) -> Path:
        return self._config_path

    def load_config(self) -> None:
        """Load configuration from the JSON file.

        Raises:
            ConfigurationError: If the file is missing or is not valid JSON.
        """
        log.debug(labels.CONFIG_LOADING.format(self._config_path))
        try:
            with open(self._config_path, encoding='utf-8') as json_file:
                self._raw_data = json.load(json_file)
        except FileNotFoundError as e:
            log.error(labels.CONFIG_FILE_NOT_FOUND.format(self._config_path))
            raise ConfigurationError(labels.CONFIG_FILE_NOT_FOUND.format(self._config_path)) from e
        except json.JSONDecodeError as e:
            log.error(labels.CONFIG_INVALID_JSON.format(self._config_path, e))
            raise ConfigurationError(labels.CONFIG_INVALID_JSON.format(self._config_path, e)) from e

        self._config = DotDict(self._raw_data)

    def list_modules(self) -> None:
        log.info(labels.CONFIG_LOADED_MODULES.format(', '.join(self._raw_data.keys())))

    def __getattr__(self, key: str) -> Any:
        """
        Enable dot notation access on the provider itself.
        Example: provider.kinematics instead of provider._config.kinematics
        """
        if key.startswith('_'):
            return object.__getattribute__(self, key)
        return getattr(self._config, key)

    def __getitem__(self, key: str) -> Any:
        if self._config is None:
            raise ConfigurationError(labels.CONFIG_MISSING_KEY.format(key))
        return self._config[key]

    def get(self, search_pattern: str, default: Any = None) -> Any:
        """Look up a value with a jmespath expression, ``default`` when it is absent."""
        value = jmespath.search(search_pattern, self._raw_data)
        log.debug(search_pattern + ': ' + str(value))
        return default if value is None else value

    def require(self, search_pattern: str) -> Any:
        """Look up a value that must be present.

        Raises:
            ConfigurationError: If the expression matches nothing.
        """
        value = jmespath.search(search_pattern, self._raw_data)
        if value is None:
            log.error(labels.CONFIG_MISSING_KEY.format(search_pattern))
            raise ConfigurationError(labels.CONFIG_MISSING_KEY.format(search_pattern))
        return value

    def get_leg_configuration(self, leg_name: LegName) -> LegConfiguration:
        leg = self.require(self.LEG.format(leg_name.value))
        pattern = self.LEG.format(leg_name.value) + '.{}'

        def field(name: str) -> Any:
            if name not in leg:
                log.error(labels.CONFIG_MISSING_KEY.format(pattern.format(name)))
                raise ConfigurationError(labels.CONFIG_MISSING_KEY.format(pattern.format(name)))
            return leg[name]

        def number(name: str, converter=float) -> Any:
            return self._number(field(name), pattern.format(name), converter)

        return LegConfiguration(
            name=leg_name,
            coxa_id=number('coxa_id', int),
            femur_id=number('femur_id', int),
            tibia_id=number('tibia_id', int),
            angle_offset=number('angle_offset'),
            coxa_position=self._vector(field('coxa_position'), pattern.format('coxa_position')),
            femur_correction=number('femur_correction'),
            tibia_correction=number('tibia_correction'),
        )

    def get_relaxed_stance(self, leg_name: LegName) -> Vector3:
        pattern = self.RELAXED_STANCE.format(leg_name.value)
        return self._vector(self.require(pattern), pattern)

    def get_robot_configuration(self) -> RobotConfiguration:
        """Build and validate the robot description.

        Raises:
            ConfigurationError: If a key is missing, a value is not a number or the leg table is invalid.
        """

        def required(pattern: str) -> float:
            return self._number(self.require(pattern), pattern)

        def optional(pattern: str, default, converter=float):
            return self._number(self.get(pattern, default), pattern, converter)

        try:
            return RobotConfiguration(
                legs=tuple(self.get_leg_configuration(name) for name in LEG_ORDER),
                link_lengths=LinkLengths(
                    coxa=required(self.KINEMATICS_COXA_LENGTH),
                    femur=required(self.KINEMATICS_FEMUR_LENGTH),
                    tibia=required(self.KINEMATICS_TIBIA_LENGTH),
                ),
                actuator_limits=ActuatorLimits(
                    min_angle=optional(self.ACTUATORS_MIN_ANGLE, constants.ACTUATOR_MIN_ANGLE),
                    max_angle=optional(self.ACTUATORS_MAX_ANGLE, constants.ACTUATOR_MAX_ANGLE),
                    center=optional(self.ACTUATORS_CENTER_ANGLE, constants.ACTUATOR_CENTER_ANGLE),
                ),
                relaxed_stance=tuple(self.get_relaxed_stance(name) for name in LEG_ORDER),
                compliance_slope=optional(
                    self.ACTUATORS_COMPLIANCE_SLOPE, constants.DEFAULT_COMPLIANCE_SLOPE, int
                ),
                moving_speed=optional(self.ACTUATORS_MOVING_SPEED, constants.DEFAULT_MOVING_SPEED, int),
                frame_rate_hz=optional(self.MOTION_FRAME_RATE_HZ, constants.FRAME_RATE_HZ),
                max_step=optional(self.MOTION_MAX_STEP, constants.DEFAULT_MAX_STEP),
            )
        except ConfigurationError as e:
            log.error(str(e))
            raise

    @staticmethod
    def _number(value: Any, pattern: str, converter=float):
        # bool is an int subclass, a JSON true/false is never a valid number here
        if isinstance(value, bool):
            raise ConfigurationError(labels.CONFIG_INVALID_VALUE.format(pattern, value))
        try:
            return converter(value)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(labels.CONFIG_INVALID_VALUE.format(pattern, value)) from e

    @staticmethod
    def _vector(values: Any, pattern: str) -> Vector3:
        try:
            return Vector3.from_sequence(values)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(labels.CONFIG_MISSING_KEY.format(pattern)) from e
