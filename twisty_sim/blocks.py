"""Blocks and their labeled faces."""

from __future__ import annotations

from typing import Iterable

from .rotations import UNROTATED, RotationMatrix
from .vectors import SphericalVector, Vector3, to_cartesian, to_spherical


def _require_id(value: str | None, what: str) -> str:
    if value is None or not str(value).strip():
        raise ValueError(f"{what} id cannot be empty")
    return value


class BlockFace:
    """Labeled direction relative to the center of its block."""

    __slots__ = ("id", "position")

    def __init__(self, face_id: str, direction: Vector3 | SphericalVector):
        self.id = _require_id(face_id, "Face")
        if isinstance(direction, SphericalVector):
            direction = to_cartesian(direction)
        if direction.is_zero():
            raise ValueError(f"Face '{face_id}' direction cannot be a zero vector")
        self.position = direction

    @property
    def spherical(self) -> SphericalVector:
        return to_spherical(self.position)

    def __repr__(self) -> str:
        return f"BlockFace({self.id!r}, {self.position})"


class Block:
    """Rigid movable piece; only its orientation changes after construction."""

    def __init__(self, block_id: str, initial_position: Vector3, faces: Iterable[BlockFace | None]):
        self.id = _require_id(block_id, "Block")
        self.initial_position = initial_position

        kept = [f for f in faces if f is not None]
        if not kept:
            raise ValueError(f"Block '{block_id}' needs at least one face")
        self.faces: tuple[BlockFace, ...] = tuple(sorted(kept, key=lambda f: f.id))
        self.orientation: RotationMatrix = UNROTATED

    @property
    def position(self) -> Vector3:
        return self.orientation.rotate(self.initial_position)

    def rotate_around(self, axis: Vector3, theta: float) -> None:
        self.orientation = RotationMatrix.from_axis_angle(axis, theta).compose(self.orientation)

    def reset(self) -> None:
        self.orientation = UNROTATED

    def get_face_position(self, face: BlockFace) -> Vector3:
        """Current world direction of one of this block's faces."""
        return self.orientation.rotate(face.position)

    def get_block_face(self, direction: Vector3 | SphericalVector) -> BlockFace | None:
        if isinstance(direction, SphericalVector):
            direction = to_cartesian(direction)
        for face in self.faces:
            if self.get_face_position(face).is_same_vector(direction):
                return face
        return None

    def get_block_face_by_id(self, face_id: str) -> BlockFace | None:
        for face in self.faces:
            if face.id == face_id:
                return face
        return None

    def __repr__(self) -> str:
        return f"Block({self.id!r}, {self.initial_position})"
