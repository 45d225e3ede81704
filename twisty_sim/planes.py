"""Planes and parametric lines."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import GeometricError
from .tolerance import is_zero
from .vectors import ZERO, Vector3, parse_coordinates


@dataclass(frozen=True)
class ParametricLine:
    """Line `point + t * vector`."""

    point: Vector3
    vector: Vector3

    def __post_init__(self):
        if self.vector.is_zero():
            raise ValueError("Line direction cannot be a zero vector")

    @classmethod
    def parse(cls, text: str) -> ParametricLine:
        values = parse_coordinates(text)
        if len(values) != 6:
            raise ValueError(f"Expected 6 coordinates, got {len(values)} in {text!r}")
        return cls(Vector3(*values[:3]), Vector3(*values[3:]))

    @classmethod
    def from_vector(cls, vector: Vector3) -> ParametricLine:
        return cls(ZERO, vector)

    @classmethod
    def from_two_points(cls, p1: Vector3, p2: Vector3) -> ParametricLine:
        return cls(p1, p2 - p1)

    @property
    def x(self) -> float:
        return self.point.x

    @property
    def y(self) -> float:
        return self.point.y

    @property
    def z(self) -> float:
        return self.point.z

    @property
    def a(self) -> float:
        return self.vector.x

    @property
    def b(self) -> float:
        return self.vector.y

    @property
    def c(self) -> float:
        return self.vector.z

    def get_point(self, t: float) -> Vector3:
        return self.point + self.vector * t

    def is_parallel_to_plane(self, plane: Plane) -> bool:
        return is_zero(self.vector.dot(plane.normal))

    def is_parallel_to_line(self, line: ParametricLine) -> bool:
        return self.vector.is_same_vector(line.vector) or self.vector.is_same_vector(-line.vector)

    def get_distance_to(self, point: Vector3) -> float:
        return (point - self.point).cross(self.vector).magnitude / self.vector.magnitude

    def get_closest_point(self, point: Vector3) -> Vector3:
        return self.point + (point - self.point).project_on(self.vector)

    def get_perpendicular(self, point: Vector3) -> ParametricLine:
        """Line through `point` crossing this line at a right angle."""
        closest = self.get_closest_point(point)
        if closest.is_same_point(point):
            raise GeometricError("Point lies on the line, perpendicular is undefined")
        return ParametricLine.from_two_points(point, closest)

    def get_intersection(self, line: ParametricLine) -> Vector3:
        normal = self.vector.cross(line.vector)
        denominator = normal.dot(normal)
        if is_zero(denominator):
            raise GeometricError("Parallel lines have no single intersection point")

        t = (line.point - self.point).cross(line.vector).dot(normal) / denominator
        candidate = self.get_point(t)
        if not is_zero(line.get_distance_to(candidate)):
            raise GeometricError("Lines do not cross")
        return candidate


def _eliminate(first: tuple[float, ...], second: tuple[float, ...], i: int, j: int) -> tuple[float, float] | None:
    """Solve two plane equations on coordinates i and j, pivoting on first[i]."""
    if is_zero(first[i]):
        return None
    divisor = first[i] * second[j] - second[i] * first[j]
    if is_zero(divisor):
        return None
    v = (second[i] * first[3] - first[i] * second[3]) / divisor
    u = (-first[3] - first[j] * v) / first[i]
    return u, v


# Coordinate set to zero, followed by the two solved coordinates.
_ELIMINATION_ORDER = ((2, 0, 1), (1, 0, 2), (0, 1, 2))


@dataclass(frozen=True)
class Plane:
    """Plane `normal . p + d = 0`."""

    normal: Vector3
    d: float

    def __post_init__(self):
        if self.normal.is_zero():
            raise ValueError("Plane normal cannot be a zero vector")

    @classmethod
    def from_coefficients(cls, a: float, b: float, c: float, d: float) -> Plane:
        return cls(Vector3(a, b, c), d)

    @classmethod
    def from_point(cls, normal: Vector3, point: Vector3) -> Plane:
        return cls(normal, -normal.dot(point))

    @classmethod
    def parse(cls, text: str) -> Plane:
        values = parse_coordinates(text)
        if len(values) != 4:
            raise ValueError(f"Expected 4 coefficients, got {len(values)} in {text!r}")
        return cls.from_coefficients(*values)

    @property
    def a(self) -> float:
        return self.normal.x

    @property
    def b(self) -> float:
        return self.normal.y

    @property
    def c(self) -> float:
        return self.normal.z

    def _evaluate(self, point: Vector3) -> float:
        return self.normal.dot(point) + self.d

    def is_on_plane(self, point: Vector3) -> bool:
        return is_zero(self._evaluate(point))

    def is_above_plane(self, point: Vector3) -> bool:
        value = self._evaluate(point)
        return value > 0.0 and not is_zero(value)

    def is_below_plane(self, point: Vector3) -> bool:
        value = self._evaluate(point)
        return value < 0.0 and not is_zero(value)

    def get_distance_to(self, point: Vector3) -> float:
        return abs(self._evaluate(point)) / self.normal.magnitude

    def is_parallel_to(self, plane: Plane) -> bool:
        n1 = self.normal.normalize()
        n2 = plane.normal.normalize()
        return n1.is_same_point(n2) or n1.is_same_point(-n2)

    def get_perpendicular(self, point: Vector3) -> ParametricLine:
        return ParametricLine(point, self.normal)

    def get_vector_projection(self, vector: Vector3) -> Vector3:
        return vector - vector.project_on(self.normal)

    def get_theta_to(self, vector: Vector3) -> float:
        """Angle between the vector and the plane surface, in [0, pi/2]."""
        return abs(math.pi / 2.0 - self.normal.get_theta_to(vector))

    def get_line_intersection(self, line: ParametricLine) -> Vector3:
        divisor = self.normal.dot(line.vector)
        if is_zero(divisor):
            raise GeometricError("Line is parallel to the plane")
        t = -self._evaluate(line.point) / divisor
        return line.get_point(t)

    def get_vector_intersection(self, vector: Vector3) -> Vector3:
        """Intersection with the line starting at the origin along `vector`."""
        divisor = self.normal.dot(vector)
        if is_zero(divisor):
            raise GeometricError("Vector is parallel to the plane")
        return vector * (-self.d / divisor)

    def get_plane_intersection(self, plane: Plane) -> ParametricLine:
        direction = self.normal.cross(plane.normal)
        if direction.is_zero():
            raise GeometricError("Parallel planes have no single intersection line")
        return ParametricLine(self._get_common_point(plane), direction)

    def _get_common_point(self, plane: Plane) -> Vector3:
        p = (self.a, self.b, self.c, self.d)
        q = (plane.a, plane.b, plane.c, plane.d)
        for zeroed, i, j in _ELIMINATION_ORDER:
            for first, second in ((p, q), (q, p)):
                solved = _eliminate(first, second, i, j)
                if solved is None:
                    continue
                coords = [0.0, 0.0, 0.0]
                coords[i], coords[j] = solved
                return Vector3(*coords)
        raise NotImplementedError(f"No elimination branch solved the intersection of {self} and {plane}")
