from enum import Enum


class ComplianceSlope(Enum):
    """Compliance slope steps supported by the actuators."""

    S2 = 2
    S4 = 4
    S8 = 8
    S16 = 16
    S32 = 32
    S64 = 64
    S128 = 128

    @staticmethod
    def from_value(value: int) -> "ComplianceSlope":
        """
        Determine the ComplianceSlope from its numeric value.

        Args:
            value: The slope as written in the configuration (e.g. 32).

        Returns:
            ComplianceSlope: The matching slope.

        Raises:
            ValueError: If the value is not one of the supported steps.
        """
        for slope in ComplianceSlope:
            if slope.value == value:
                return slope
        raise ValueError(f"Unsupported compliance slope: {value}")
