from ._config_provider import ConfigProvider
from ._dot_dict import DotDict
from ._leg_configuration import ActuatorLimits, LegConfiguration, LinkLengths
from ._leg_name import LEG_ORDER, LegFlags, LegName
from ._robot_configuration import RobotConfiguration

__all__ = [
    "ActuatorLimits",
    "ConfigProvider",
    "DotDict",
    "LEG_ORDER",
    "LegConfiguration",
    "LegFlags",
    "LegName",
    "LinkLengths",
    "RobotConfiguration",
]
