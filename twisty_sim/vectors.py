"""Cartesian and spherical vector primitives."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .errors import GeometricError
from .tolerance import FULL_TURN, acos, cos, is_equal, is_zero, sin


def parse_coordinates(text: str) -> list[float]:
    """Parse a "(a b c ...)" string into floats."""
    text = text.strip()
    if len(text) < 2 or text[0] != "(" or text[-1] != ")":
        raise ValueError(f"Coordinates must be written as '(a b c ...)', got {text!r}")
    try:
        return [float(part) for part in text[1:-1].split()]
    except ValueError as exc:
        raise ValueError(f"Invalid number in coordinates {text!r}") from exc


@dataclass(frozen=True)
class Vector2:
    x: float
    y: float

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def is_zero(self) -> bool:
        return is_zero(self.x) and is_zero(self.y)

    def is_on_x(self) -> bool:
        return is_zero(self.y)

    def is_on_y(self) -> bool:
        return is_zero(self.x)

    def is_same_point(self, other: Vector2) -> bool:
        return is_equal(self.x, other.x) and is_equal(self.y, other.y)


@dataclass(frozen=True)
class Vector3:
    """Immutable 3D cartesian vector."""

    x: float
    y: float
    z: float

    @classmethod
    def parse(cls, text: str) -> Vector3:
        values = parse_coordinates(text)
        if len(values) != 3:
            raise ValueError(f"Expected 3 coordinates, got {len(values)} in {text!r}")
        return cls(*values)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vector3:
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, k: float) -> Vector3:
        return Vector3(self.x * k, self.y * k, self.z * k)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"({self.x:g} {self.y:g} {self.z:g})"

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def normalize(self) -> Vector3:
        mag = self.magnitude
        if is_zero(mag):
            return self
        return Vector3(self.x / mag, self.y / mag, self.z / mag)

    def reverse(self) -> Vector3:
        return -self

    def is_zero(self) -> bool:
        return is_zero(self.x) and is_zero(self.y) and is_zero(self.z)

    def is_on_x(self) -> bool:
        return is_zero(self.y) and is_zero(self.z)

    def is_on_y(self) -> bool:
        return is_zero(self.x) and is_zero(self.z)

    def is_on_z(self) -> bool:
        return is_zero(self.x) and is_zero(self.y)

    def is_same_point(self, other: Vector3) -> bool:
        return is_equal(self.x, other.x) and is_equal(self.y, other.y) and is_equal(self.z, other.z)

    def is_same_vector(self, other: Vector3) -> bool:
        """True when both vectors point in the same direction, whatever their length."""
        return self.normalize().is_same_point(other.normalize())

    def get_theta_to(self, other: Vector3) -> float:
        mags = self.magnitude * other.magnitude
        if is_zero(mags):
            raise GeometricError("Angle to a zero vector is undefined")
        return acos(self.dot(other) / mags)

    def project_on(self, other: Vector3) -> Vector3:
        norm2 = other.dot(other)
        if is_zero(norm2):
            return ZERO
        return other * (self.dot(other) / norm2)

    def rotate_around_x(self, theta: float) -> Vector3:
        c, s = cos(theta), sin(theta)
        return Vector3(self.x, self.y * c - self.z * s, self.y * s + self.z * c)

    def rotate_around_y(self, theta: float) -> Vector3:
        c, s = cos(theta), sin(theta)
        return Vector3(self.x * c + self.z * s, self.y, -self.x * s + self.z * c)

    def rotate_around_z(self, theta: float) -> Vector3:
        c, s = cos(theta), sin(theta)
        return Vector3(self.x * c - self.y * s, self.x * s + self.y * c, self.z)

    def rotate_around_vector(self, axis: Vector3, theta: float) -> Vector3:
        """Counter-clockwise rotation around an arbitrary axis (Rodrigues)."""
        k = axis.normalize()
        c, s = cos(theta), sin(theta)
        return self * c + k.cross(self) * s + k * (k.dot(self) * (1.0 - c))

    def transpose_from_referential(self, referential: Vector3) -> Vector3:
        """Express this vector in the frame whose X axis is `referential`.

        The frame is the one reached by the shortest rotation taking the world
        X axis onto `referential`; the result is the inverse of that rotation
        applied to this vector.
        """
        n = referential.normalize()
        if n.is_on_x():
            if n.x > 0.0:
                return self
            # Half turn around Z keeps the frame right-handed.
            return Vector3(-self.x, -self.y, self.z)

        v = X_AXIS.cross(n)
        c = X_AXIS.dot(n)
        skew = np.array(
            [
                [0.0, -v.z, v.y],
                [v.z, 0.0, -v.x],
                [-v.y, v.x, 0.0],
            ],
            dtype=np.float64,
        )
        rot = np.eye(3) + skew + (skew @ skew) / (1.0 + c)
        return Vector3.from_array(rot.T @ self.to_array())


ZERO = Vector3(0.0, 0.0, 0.0)
X_AXIS = Vector3(1.0, 0.0, 0.0)
Y_AXIS = Vector3(0.0, 1.0, 0.0)
Z_AXIS = Vector3(0.0, 0.0, 1.0)


def _normalize_angle(value: float) -> float:
    value = value % FULL_TURN
    if is_equal(value, FULL_TURN):
        return 0.0
    return value


class SphericalVector:
    """Direction on the unit sphere, ISO convention (phi azimuth, theta polar)."""

    __slots__ = ("phi", "theta")

    def __init__(self, phi: float, theta: float):
        phi = _normalize_angle(phi)
        theta = _normalize_angle(theta)
        if theta > math.pi and not is_equal(theta, math.pi):
            phi = _normalize_angle(math.pi + phi)
            theta = FULL_TURN - theta
        if is_zero(theta) or is_equal(theta, math.pi):
            phi = 0.0
        self.phi = phi
        self.theta = theta

    @classmethod
    def from_degrees(cls, phi: float, theta: float) -> SphericalVector:
        return cls(math.radians(phi), math.radians(theta))

    def to_cartesian(self) -> Vector3:
        return to_cartesian(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SphericalVector):
            return NotImplemented
        return is_equal(self.phi, other.phi) and is_equal(self.theta, other.theta)

    # Equality is tolerant, so no hash can agree with it.
    __hash__ = None

    def __repr__(self) -> str:
        return f"SphericalVector(phi={self.phi!r}, theta={self.theta!r})"


def to_cartesian(sv: SphericalVector) -> Vector3:
    sin_theta = sin(sv.theta)
    return Vector3(sin_theta * cos(sv.phi), sin_theta * sin(sv.phi), cos(sv.theta))


def to_spherical(v: Vector3) -> SphericalVector:
    if v.is_zero():
        return SphericalVector(0.0, 0.0)
    return SphericalVector(math.atan2(v.y, v.x), acos(v.z / v.magnitude))


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def radians_to_degrees(radians: float) -> float:
    return radians * 180.0 / math.pi
