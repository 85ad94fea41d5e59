"""
Exceptions raised by the quadruped packages.
"""

from typing import Optional


class QuadrupedError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(QuadrupedError):
    """The leg table or the configuration file is invalid. Fatal at start-up."""


class KinematicsError(QuadrupedError, ValueError):
    """A foot target cannot be turned into a valid leg pose.

    Attributes:
        target: The requested foot position in the body frame.
        leg: The leg configuration the solve was attempted for.
    """

    def __init__(self, message: str, target=None, leg=None):
        super().__init__(message)
        self.target = target
        self.leg = leg


class UnreachableDirectionError(KinematicsError):
    """The target bearing lies outside the leg's forward hemisphere."""

    def __init__(self, message: str, target=None, leg=None, angle: Optional[float] = None):
        super().__init__(message, target, leg)
        self.angle = angle


class UnreachableDistanceError(KinematicsError):
    """The target is farther than femur + tibia or closer than their difference."""

    def __init__(self, message: str, target=None, leg=None, reach: Optional[float] = None):
        super().__init__(message, target, leg)
        self.reach = reach


class JointLimitError(KinematicsError):
    """A solved actuator angle is outside the actuator's travel."""

    def __init__(self, message: str, target=None, leg=None, joint: Optional[str] = None):
        super().__init__(message, target, leg)
        self.joint = joint


__all__ = [
    'QuadrupedError',
    'ConfigurationError',
    'KinematicsError',
    'UnreachableDirectionError',
    'UnreachableDistanceError',
    'JointLimitError',
]
