### Leg Geometry Constants ###
# Link lengths of every leg (in cm)
COXA_LENGTH = 5.3
FEMUR_LENGTH = 6.5
TIBIA_LENGTH = 13.0

# Angles by which the femur and tibia links sit off the motor centers
FEMUR_OFFSET = 13
TIBIA_OFFSET = 35

### Actuator Constants ###
# Actuator travel in degrees; 150 is the center (horizon) of every motor
ACTUATOR_MIN_ANGLE = 0.0
ACTUATOR_MAX_ANGLE = 300.0
ACTUATOR_CENTER_ANGLE = 150.0

# Values written to every motor by the driver setup
DEFAULT_COMPLIANCE_SLOPE = 32
DEFAULT_MOVING_SPEED = 300

### Motion Controller Constants ###
FRAME_RATE_HZ = 30

# Maximum distance a foot moves in one tick (cm)
DEFAULT_MAX_STEP = 1.0

# Tolerance used when checking whether the feet reached their target (cm)
DEFAULT_MOVE_TOLERANCE = 1e-3

### Configuration ###
CONFIGURATION_FILE_NAME = 'quadruped.json'
DEFAULT_CONFIGURATION_FILE_NAME = 'quadruped.default.json'

### Logging ###
LOGS_FOLDER = 'logs'
LOG_FILE_NAME = 'Quadruped.log'
LOG_LEVEL = 'INFO'


__all__ = [
    'COXA_LENGTH',
    'FEMUR_LENGTH',
    'TIBIA_LENGTH',
    'FEMUR_OFFSET',
    'TIBIA_OFFSET',
    'ACTUATOR_MIN_ANGLE',
    'ACTUATOR_MAX_ANGLE',
    'ACTUATOR_CENTER_ANGLE',
    'DEFAULT_COMPLIANCE_SLOPE',
    'DEFAULT_MOVING_SPEED',
    'FRAME_RATE_HZ',
    'DEFAULT_MAX_STEP',
    'DEFAULT_MOVE_TOLERANCE',
    'CONFIGURATION_FILE_NAME',
    'DEFAULT_CONFIGURATION_FILE_NAME',
    'LOGS_FOLDER',
    'LOG_FILE_NAME',
    'LOG_LEVEL',
]
