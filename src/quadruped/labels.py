"""
Message strings for the quadruped runtime.

All log and error messages live here so wording stays consistent across modules.
"""

# Configuration
CONFIG_LOADING = "Loading configuration from {}"
CONFIG_LOADED_MODULES = "Detected configuration for the sections: {}"
CONFIG_FILE_NOT_FOUND = "Configuration file not found: {}"
CONFIG_INVALID_JSON = "Configuration file {} is not valid JSON: {}"
CONFIG_MISSING_KEY = "Configuration key '{}' is missing"
CONFIG_NO_ATTRIBUTE = "Config has no attribute '{}'"
CONFIG_INVALID_VALUE = "Configuration key '{}' has an invalid value: {!r}"

ERR_CONFIG_MISSING_LEG = "Leg configuration missing for {leg}"
ERR_CONFIG_DUPLICATE_LEG = "Leg configuration for {leg} appears more than once"
ERR_CONFIG_DUPLICATE_MOTOR = "Motor id {motor_id} is used by more than one joint"
ERR_CONFIG_INVALID_LINK_LENGTH = "Link length {name}={value} must be positive"
ERR_CONFIG_INVALID_LIMITS = "Actuator limits [{min_angle}, {max_angle}] are not a valid range"
ERR_CONFIG_INVALID_STEP = "Maximum step {value} must be positive"
ERR_CONFIG_INVALID_FRAME_RATE = "Frame rate {value} must be positive"
ERR_CONFIG_INVALID_COMPLIANCE_SLOPE = "Compliance slope {value} is not supported, use one of {supported}"
ERR_CONFIG_INVALID_MOVING_SPEED = "Moving speed {value} must be positive"

# Inverse kinematics
ERR_IK_UNREACHABLE_DIRECTION = "Target angle is {angle:.3f} for target {target}; it is behind the leg"
ERR_IK_UNREACHABLE_DISTANCE = "Target {target} is {reach:.3f} from the femur joint, outside [{min_reach:.3f}, {max_reach:.3f}]"
ERR_IK_JOINT_LIMIT = "{joint} angle {angle:.3f} for target {target} is outside [{min_angle:.1f}, {max_angle:.1f}]"

# Driver
DRIVER_SETUP = "Setting compliance slope {} and moving speed {} on {} motors"
DRIVER_MOVE_LEG = "Moving leg with motors {} to {}"
DRIVER_DISABLE_MOTORS = "Disabling torque on {} motors"
DRIVER_CLOSING = "Closing actuator driver"

# Motion controller
MOTION_STARTING = "Motion controller starting at {} Hz"
MOTION_STOPPING = "Motion controller stopping"
MOTION_TARGET_UPDATED = "New target: {}"
MOTION_INTENT_UPDATED = "New remote intent: direction {} rotation {:.3f}"
MOTION_TICK_FAILED = "Holding previous pose, tick failed: {}"
MOTION_TICK_OVERRUN = "Tick took {:.4f}s, longer than the frame duration {:.4f}s"
