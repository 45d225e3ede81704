"""Block, axis and face layouts for cube-shaped puzzles.

World axes: X points to the front face, Y to the right face, Z to the up face.
"""

from __future__ import annotations

import re
from itertools import combinations, product

from .axes import CoreFace, LayerSeparator, RotationAxis
from .blocks import Block, BlockFace
from .engine import RotationCore
from .planes import Plane
from .vectors import Vector3

# Face ids, in the order used to build block ids.
FACE_ORDER = ("U", "D", "F", "B", "L", "R")

FACE_POSITIONS = {
    "U": Vector3(0.0, 0.0, 1.0),
    "D": Vector3(0.0, 0.0, -1.0),
    "F": Vector3(1.0, 0.0, 0.0),
    "B": Vector3(-1.0, 0.0, 0.0),
    "L": Vector3(0.0, -1.0, 0.0),
    "R": Vector3(0.0, 1.0, 0.0),
}

OPPOSITE_FACES = {"U": "D", "D": "U", "F": "B", "B": "F", "L": "R", "R": "L"}

# Corner id -> the three faces meeting there, e.g. "UFL".
CORNERS = {"".join(faces): faces for faces in product(("U", "D"), ("F", "B"), ("L", "R"))}

_TAG_RE = re.compile(r"^(?P<kind>Rubik|Skewb)(?:\[(?P<size>\d+)\])?$")


def corner_position(corner_id: str) -> Vector3:
    faces = CORNERS[corner_id]
    return FACE_POSITIONS[faces[0]] + FACE_POSITIONS[faces[1]] + FACE_POSITIONS[faces[2]]


def cube_core_faces() -> list[CoreFace]:
    return [CoreFace(face_id, Plane(FACE_POSITIONS[face_id], -1.0)) for face_id in FACE_ORDER]


def _faces(face_ids) -> list[BlockFace]:
    return [BlockFace(face_id, FACE_POSITIONS[face_id]) for face_id in face_ids]


def corner_blocks() -> list[Block]:
    return [Block(f"C{corner_id}", corner_position(corner_id), _faces(faces)) for corner_id, faces in CORNERS.items()]


def center_blocks() -> list[Block]:
    return [Block(f"CF_{face_id}", FACE_POSITIONS[face_id], _faces([face_id])) for face_id in FACE_ORDER]


def edge_blocks() -> list[Block]:
    blocks = []
    for first, second in combinations(FACE_ORDER, 2):
        if OPPOSITE_FACES[first] == second:
            continue
        position = FACE_POSITIONS[first] + FACE_POSITIONS[second]
        blocks.append(Block(f"E_{first}{second}", position, _faces([first, second])))
    return blocks


def rubik_cube(size: int = 3) -> RotationCore:
    if size not in (2, 3):
        raise ValueError("Only Rubik sizes 2 and 3 are supported")

    blocks = corner_blocks()
    if size == 3:
        blocks += edge_blocks() + center_blocks()

    axes = []
    for face_id in FACE_ORDER:
        vector = FACE_POSITIONS[face_id]
        if size == 2:
            axes.append(RotationAxis(face_id, vector))
        else:
            # Outer shell, slice, opposite outer shell.
            axes.append(
                RotationAxis(
                    face_id,
                    vector,
                    [
                        LayerSeparator(f"L_{face_id}_0", Plane(vector, -0.5)),
                        LayerSeparator(f"L_{face_id}_1", Plane(vector, 0.5)),
                    ],
                )
            )
    return RotationCore(blocks, axes, cube_core_faces())


def skewb() -> RotationCore:
    blocks = corner_blocks() + center_blocks()
    axes = [RotationAxis(corner_id, corner_position(corner_id)) for corner_id in CORNERS]
    return RotationCore(blocks, axes, cube_core_faces())


def create_core(tag: str) -> RotationCore:
    """Build a core from a tag such as "Rubik[3]" or "Skewb"."""
    match = _TAG_RE.match(tag.strip()) if tag else None
    if match is None:
        raise ValueError(f"Unknown core type {tag!r}")
    if match["kind"] == "Skewb":
        if match["size"] is not None:
            raise ValueError(f"Skewb does not take a size, got {tag!r}")
        return skewb()
    if match["size"] is None:
        raise ValueError(f"Rubik needs a size, e.g. 'Rubik[3]', got {tag!r}")
    return rubik_cube(int(match["size"]))
