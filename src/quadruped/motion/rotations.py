"""
Rotation helpers for whole-body posture changes.

Matrices act on column vectors in the body frame (+X right, +Y forward, +Z up).
"""

from dataclasses import dataclass
from math import cos, radians, sin

import numpy as np

# ---------------------------------------------------------------------------
# Rotation matrix helpers (angles in radians)
# ---------------------------------------------------------------------------


def rotate_x(theta: float) -> np.ndarray:
    """Rotation about X-axis."""
    return np.array(
        [
            [1.0, 0.0, 0.0],
            [0.0, cos(theta), -sin(theta)],
            [0.0, sin(theta), cos(theta)],
        ]
    )


def rotate_y(theta: float) -> np.ndarray:
    """Rotation about Y-axis."""
    return np.array(
        [
            [cos(theta), 0.0, sin(theta)],
            [0.0, 1.0, 0.0],
            [-sin(theta), 0.0, cos(theta)],
        ]
    )


def rotate_z(theta: float) -> np.ndarray:
    """Rotation about Z-axis."""
    return np.array(
        [
            [cos(theta), -sin(theta), 0.0],
            [sin(theta), cos(theta), 0.0],
            [0.0, 0.0, 1.0],
        ]
    )


def is_rotation_matrix(matrix: np.ndarray, tolerance: float = 1e-6) -> bool:
    """Check that ``matrix`` is a proper 3x3 rotation (orthonormal, determinant +1)."""
    matrix = np.asarray(matrix, dtype=float)
    if matrix.shape != (3, 3):
        return False
    return bool(
        np.allclose(matrix @ matrix.T, np.eye(3), atol=tolerance)
        and abs(np.linalg.det(matrix) - 1.0) <= tolerance
    )


@dataclass(frozen=True)
class Rotation:
    """Body attitude change in degrees.

    Attributes:
        yaw: Turn about the vertical (Z) axis, counter-clockwise positive.
        pitch: Tilt about the lateral (X) axis, nose up positive.
        roll: Tilt about the forward (Y) axis.
    """

    yaw: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0

    def to_matrix(self) -> np.ndarray:
        """
        Combines the three rotations into one 3x3 matrix.

        Yaw is applied last so the tilt happens in the body's own heading.
        """
        return rotate_z(radians(self.yaw)) @ rotate_x(radians(self.pitch)) @ rotate_y(radians(self.roll))


__all__ = ['Rotation', 'rotate_x', 'rotate_y', 'rotate_z', 'is_rotation_matrix']
