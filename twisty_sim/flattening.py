"""2D projections of 3D points and the comparers built on them."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable

from .planes import Plane
from .tolerance import FULL_TURN, acos, is_equal, is_zero
from .vectors import Vector2, Vector3


class CartesianFlattener:
    """Maps points to the local 2D frame of a plane, seen from the tip of its normal."""

    def __init__(self, plane: Plane):
        self.plane = plane
        self._normal = plane.normal.normalize()

    def convert_to_2d(self, point: Vector3) -> Vector2:
        n = self._normal
        if n.is_on_x():
            return Vector2(point.y, point.z) if n.x > 0.0 else Vector2(-point.y, point.z)
        if n.is_on_y():
            return Vector2(-point.x, point.z) if n.y > 0.0 else Vector2(point.x, point.z)
        if n.is_on_z():
            return Vector2(point.y, -point.x) if n.z > 0.0 else Vector2(point.y, point.x)

        projected = self.plane.get_line_intersection(self.plane.get_perpendicular(point))
        local = projected.transpose_from_referential(n)
        return Vector2(local.y, local.z)


class CircularVectorComparer:
    """Counter-clockwise ordering of vectors around the normal of a plane.

    Vectors lying on the normal line have no angle and sort after all others.
    """

    def __init__(self, plane: Plane):
        self.plane = plane
        self.flattener = CartesianFlattener(plane)

    def get_angle(self, v: Vector3) -> float | None:
        flat = self.flattener.convert_to_2d(v)
        if flat.is_zero():
            return None
        angle = acos(flat.x / flat.magnitude)
        if flat.y < 0.0 and not is_zero(flat.y):
            angle = FULL_TURN - angle
        if is_equal(angle, FULL_TURN):
            return 0.0
        return angle

    def compare(self, x: Vector3, y: Vector3) -> int:
        if x.is_same_point(y):
            return 0
        if self.flattener.convert_to_2d(x).is_same_point(self.flattener.convert_to_2d(y)):
            return 0

        theta_x = self.get_angle(x)
        theta_y = self.get_angle(y)
        if theta_x is None or theta_y is None:
            return (theta_x is None) - (theta_y is None)
        if is_equal(theta_x, theta_y):
            return 0
        return -1 if theta_x < theta_y else 1

    def sort(self, vectors: Iterable[Vector3]) -> list[Vector3]:
        return sorted(vectors, key=cmp_to_key(self.compare))


def compare_positions(a: Vector3, b: Vector3) -> int:
    """Reading order: top to bottom (Z), then right to left (Y), then back to front (X)."""
    for va, vb, descending in ((a.z, b.z, True), (a.y, b.y, True), (a.x, b.x, False)):
        if is_equal(va, vb):
            continue
        result = -1 if va < vb else 1
        return -result if descending else result
    return 0


def sort_positions(points: Iterable[Vector3]) -> list[Vector3]:
    return sorted(points, key=cmp_to_key(compare_positions))
