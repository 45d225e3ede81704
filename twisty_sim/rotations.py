"""Rotation matrices built from axis-angle pairs.

Angles follow the puzzle convention: a positive angle turns clockwise when
looking at the axis from its tip, which is why the angle is negated before the
Rodrigues terms are evaluated.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .tolerance import EPSILON, align_ratio_limits, cos, is_zero, sin
from .vectors import X_AXIS, Y_AXIS, Z_AXIS, Vector3


@dataclass(frozen=True)
class SimpleRotation:
    """Single rotation around an axis, clockwise-positive angle in radians."""

    axis: Vector3
    angle: float

    def __post_init__(self):
        if self.axis.is_zero():
            raise ValueError("Rotation axis cannot be a zero vector")


class RotationMatrix:
    """Orthonormal 3x3 rotation stored as a numpy array."""

    __slots__ = ("_m",)

    def __init__(self, matrix: np.ndarray | None = None):
        if matrix is None:
            self._m = np.eye(3, dtype=np.float64)
        else:
            arr = np.asarray(matrix, dtype=np.float64)
            if arr.shape != (3, 3):
                raise ValueError(f"Rotation matrix must have shape (3, 3), got {arr.shape}")
            self._m = arr.copy()
        self._m.setflags(write=False)

    @classmethod
    def identity(cls) -> RotationMatrix:
        return cls()

    @classmethod
    def from_axis_angle(cls, axis: Vector3, theta: float) -> RotationMatrix:
        if axis.is_zero():
            raise ValueError("Rotation axis cannot be a zero vector")
        n = axis.normalize()
        c = cos(-theta)
        s = sin(-theta)
        t = 1.0 - c
        x, y, z = n.x, n.y, n.z
        return cls(
            np.array(
                [
                    [c + x * x * t, x * y * t - z * s, x * z * t + y * s],
                    [x * y * t + z * s, c + y * y * t, y * z * t - x * s],
                    [x * z * t - y * s, y * z * t + x * s, c + z * z * t],
                ],
                dtype=np.float64,
            )
        )

    @property
    def matrix(self) -> np.ndarray:
        return self._m

    def rotate(self, vector: Vector3) -> Vector3:
        return Vector3.from_array(self._m @ vector.to_array())

    def compose(self, other: RotationMatrix) -> RotationMatrix:
        """Rotation equivalent to applying `other` first, then this rotation."""
        return RotationMatrix(self._m @ other._m)

    def inverse(self) -> RotationMatrix:
        return RotationMatrix(self._m.T)

    def is_same_rotation(self, other: RotationMatrix) -> bool:
        return bool(np.all(np.abs(self._m - other._m) < EPSILON))

    def is_identity(self) -> bool:
        return self.is_same_rotation(UNROTATED)

    def get_euler_angles(self) -> list[SimpleRotation]:
        """Decompose as Rz * Ry * Rx, returned in application order (X, Y, Z).

        When cos(Y) vanishes (gimbal lock) the Z angle is fixed to zero, the
        whole remaining rotation is carried by X and at most two rotations are
        returned.
        """
        m = self._m
        beta = -math.asin(align_ratio_limits(float(m[2, 0])))
        if is_zero(math.hypot(float(m[0, 0]), float(m[1, 0]))):
            alpha = math.atan2(-float(m[1, 2]), float(m[1, 1]))
            gamma = 0.0
        else:
            alpha = math.atan2(float(m[2, 1]), float(m[2, 2]))
            gamma = math.atan2(float(m[1, 0]), float(m[0, 0]))

        rotations = []
        for axis, angle in ((X_AXIS, alpha), (Y_AXIS, beta), (Z_AXIS, gamma)):
            if not is_zero(angle):
                # Stored matrices are counter-clockwise, results are clockwise-positive.
                rotations.append(SimpleRotation(axis, -angle))
        return rotations

    def __repr__(self) -> str:
        return f"RotationMatrix({self._m.tolist()!r})"


UNROTATED = RotationMatrix()
