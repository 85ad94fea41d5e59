"""Actuator driver contract."""

from quadruped.hardware.actuator._actuator_driver import ActuatorDriver
from quadruped.hardware.actuator._compliance_slope import ComplianceSlope

__all__ = ["ActuatorDriver", "ComplianceSlope"]
