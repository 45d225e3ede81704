"""Solved-state checks and alteration analysis of blocks."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Flag

from .blocks import Block
from .engine import RotationCore
from .vectors import Vector3


class AlterationType(Flag):
    NONE = 0
    POSITION = 1
    ORIENTATION = 2


@dataclass
class DifferenceRatios:
    """Per-position outcome of comparing a target core against a reference core."""

    unchanged: int = 0
    rotated: int = 0
    replaced: int = 0
    moved: int = 0


def _alteration(expected: dict[str, Vector3], block: Block) -> AlterationType:
    """Compare the faces of `block` with the face directions expected at its place.

    A face count mismatch or an unknown face id means another block sits
    there; any face pointing elsewhere means the right block is twisted.
    """
    if len(expected) != len(block.faces):
        return AlterationType.POSITION

    result = AlterationType.NONE
    for face in block.faces:
        direction = expected.get(face.id)
        if direction is None:
            return AlterationType.POSITION
        if not block.get_face_position(face).is_same_vector(direction):
            result = AlterationType.ORIENTATION
    return result


def get_alteration(core: RotationCore, block: Block) -> AlterationType:
    """Compare a block with the one the solved core holds at its current position."""
    original = core.get_block_for_initial_position(block.position)
    if original is None:
        # Stopped between two positions.
        return AlterationType.POSITION
    return _alteration({face.id: face.position for face in original.faces}, block)


def count_alterations(core: RotationCore) -> Counter:
    return Counter(get_alteration(core, b) for b in core.blocks)


def get_difference_ratios(reference: RotationCore, target: RotationCore) -> DifferenceRatios:
    """Count, for each reference block position, what the target core holds there."""
    ratios = DifferenceRatios()
    for block in reference.blocks:
        other = target.get_block_at(block.position)
        if other is None:
            ratios.moved += 1
            continue

        expected = {face.id: block.get_face_position(face) for face in block.faces}
        alteration = _alteration(expected, other)
        if alteration == AlterationType.POSITION:
            ratios.replaced += 1
        elif alteration == AlterationType.ORIENTATION:
            ratios.rotated += 1
        else:
            ratios.unchanged += 1
    return ratios


def is_solved_orientation_invariant(core: RotationCore) -> bool:
    """True when each core face shows a single face id, whatever the global orientation."""
    normals = [face.plane.normal for face in core.faces]
    for block in core.blocks:
        for face in block.faces:
            direction = block.get_face_position(face)
            # A layer stopped between two positions leaves faces pointing nowhere.
            if not any(direction.is_same_vector(n) for n in normals):
                return False

    for face in core.faces:
        shown = set()
        for block in core.get_blocks_for_face(face.plane.normal):
            shown.add(block.get_block_face(face.plane.normal).id)
        if len(shown) > 1:
            return False
    return True
