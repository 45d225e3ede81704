"""Rotation core: owns blocks, axes and faces, and applies layer rotations."""

from __future__ import annotations

import logging
from typing import Iterable

from .axes import OUTER_LAYER, CoreFace, LayerInterval, RotationAxis
from .bandages import BandagesCollection, RotationValidator
from .blocks import Block
from .errors import RotationRejectedError
from .tolerance import is_zero
from .vectors import Vector3

logger = logging.getLogger(__name__)


def _index_by_id(items: Iterable, what: str) -> dict:
    index = {}
    for item in items:
        if item.id in index:
            raise ValueError(f"Duplicate {what} id '{item.id}'")
        index[item.id] = item
    return index


class RotationCore:
    """Generic rotation model parameterized by its block, axis and face definitions.

    Not thread-safe: a rotation selects then mutates a batch of blocks, so
    concurrent callers must synchronize externally.
    """

    def __init__(
        self,
        blocks: Iterable[Block],
        axes: Iterable[RotationAxis],
        faces: Iterable[CoreFace] = (),
        validators: Iterable[RotationValidator] = (),
    ):
        self.blocks: tuple[Block, ...] = tuple(blocks)
        self._blocks = _index_by_id(self.blocks, "block")
        self._axes: dict[str, RotationAxis] = _index_by_id(axes, "axis")
        self._faces: dict[str, CoreFace] = _index_by_id(faces, "face")

        self.bandages = BandagesCollection(self.blocks)
        self._validators: list[RotationValidator] = [self.bandages, *validators]

        self.step_count = 0
        self.history: list[tuple[str, float, LayerInterval]] = []

    @property
    def axes(self) -> list[RotationAxis]:
        return list(self._axes.values())

    @property
    def faces(self) -> list[CoreFace]:
        return list(self._faces.values())

    def register_validator(self, validator: RotationValidator) -> None:
        self._validators.append(validator)

    def get_axis(self, axis_id: str) -> RotationAxis | None:
        return self._axes.get(axis_id)

    def get_block(self, block_id: str) -> Block | None:
        return self._blocks.get(block_id)

    def get_block_for_initial_position(self, position: Vector3) -> Block | None:
        for block in self.blocks:
            if block.initial_position.is_same_point(position):
                return block
        return None

    def get_block_at(self, position: Vector3) -> Block | None:
        """Block currently occupying a position."""
        for block in self.blocks:
            if block.position.is_same_point(position):
                return block
        return None

    def get_face(self, face_id: str) -> CoreFace | None:
        return self._faces.get(face_id)

    def get_blocks_for_face(self, face: str | Vector3) -> list[Block]:
        """Blocks showing a face in the direction of a core face (given by id or vector)."""
        if isinstance(face, str):
            core_face = self._faces.get(face)
            if core_face is None:
                return []
            direction = core_face.plane.normal
        else:
            direction = face
        return [b for b in self.blocks if b.get_block_face(direction) is not None]

    def select_blocks(self, axis_id: str, layer_interval: LayerInterval | None = None) -> list[Block]:
        axis = self._require_axis(axis_id)
        interval = OUTER_LAYER if layer_interval is None else layer_interval
        return [b for b in self.blocks if axis.contains_block(interval, b.position)]

    def can_rotate_around(self, axis_id: str, theta: float, layer_interval: LayerInterval | None = None) -> bool:
        axis = self._require_axis(axis_id)
        selected = self.select_blocks(axis_id, layer_interval)
        return self._validate(axis, theta, selected)

    def rotate_around(self, axis_id: str, theta: float, layer_interval: LayerInterval | None = None) -> list[Block]:
        """Rotate the selected shell(s) around an axis; returns the blocks that moved."""
        axis = self._require_axis(axis_id)
        interval = OUTER_LAYER if layer_interval is None else layer_interval
        selected = self.select_blocks(axis_id, interval)

        if not self._validate(axis, theta, selected):
            block_ids = [b.id for b in selected]
            logger.info("Rotation around %s by %.6f rejected for %s", axis_id, theta, block_ids)
            raise RotationRejectedError(axis_id, theta, block_ids)

        if is_zero(theta):
            return []

        for block in selected:
            block.rotate_around(axis.vector, theta)
        self.step_count += 1
        self.history.append((axis_id, theta, interval))
        logger.debug("Rotated %d blocks around %s by %.6f (layers %s)", len(selected), axis_id, theta, interval)
        return selected

    def reset(self) -> None:
        for block in self.blocks:
            block.reset()
        self.step_count = 0
        self.history = []

    def _validate(self, axis: RotationAxis, theta: float, blocks: list[Block]) -> bool:
        return all(v.can_rotate_around(axis, theta, blocks) for v in self._validators)

    def _require_axis(self, axis_id: str) -> RotationAxis:
        axis = self._axes.get(axis_id)
        if axis is None:
            raise ValueError(f"Unknown rotation axis '{axis_id}'")
        return axis
