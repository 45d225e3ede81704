"""Rotation-invariant topology ids for blocks and bonded groups."""

from __future__ import annotations

from functools import cmp_to_key
from itertools import permutations, product
from typing import Callable, Iterable, Sequence, TypeVar

from .bandages import BandagesCollection
from .blocks import Block
from .flattening import CircularVectorComparer, compare_positions
from .planes import Plane
from .vectors import Vector3

T = TypeVar("T")

FACE_SEPARATOR = "-"
BANDAGE_SEPARATOR = "#"
EXTENSION_MARK = "*"


def stringify_angle(angle: float) -> str:
    return str(round(angle * 100.0))


def _part_key(parts: list[str]) -> tuple:
    return tuple((0, int(p), "") if p.isdigit() else (1, 0, p) for p in parts)


def _circular_parts(
    plane: Plane,
    items: Sequence[T],
    vector_of: Callable[[T], Vector3],
    label_of: Callable[[T], str],
) -> list[str]:
    """Alternate item labels with the angles between consecutive items around the plane normal.

    Items are taken counter-clockwise; the starting item and the order of items
    sharing an azimuth are the ones giving the smallest sequence, so the result
    depends neither on the plane's 2D frame nor on the item labels.
    Items lying on the normal itself come last.
    """
    comparer = CircularVectorComparer(plane)
    ordered = sorted(items, key=cmp_to_key(lambda a, b: comparer.compare(vector_of(a), vector_of(b))))

    # Runs of items the comparer cannot tell apart.
    groups: list[list[T]] = []
    for item in ordered:
        if groups and comparer.compare(vector_of(groups[-1][0]), vector_of(item)) == 0:
            groups[-1].append(item)
        else:
            groups.append([item])
    around = sum(1 for item in ordered if comparer.get_angle(vector_of(item)) is not None)

    def build(sequence: list[T]) -> list[str]:
        parts = [label_of(sequence[0])]
        for prev, cur in zip(sequence, sequence[1:]):
            parts.append(stringify_angle(vector_of(prev).get_theta_to(vector_of(cur))))
            parts.append(label_of(cur))
        return parts

    candidates = []
    for arrangement in product(*(permutations(group) for group in groups)):
        sequence = [item for group in arrangement for item in group]
        for k in range(around) or [0]:
            candidates.append(build(sequence[k:around] + sequence[:k] + sequence[around:]))
    return min(candidates, key=_part_key)


class AngularTopologyBuilder:
    """Builds topology ids from the angles between a block's faces."""

    def __init__(self, bandages: BandagesCollection | None = None):
        self.bandages = bandages

    def get_topologic_id(self, block: Block) -> str:
        plane = Plane(block.initial_position, 0.0)
        base = FACE_SEPARATOR.join(
            _circular_parts(
                plane,
                list(block.faces),
                lambda face: face.position,
                lambda face: stringify_angle(plane.get_theta_to(face.position)),
            )
        )

        bandage = self.bandages.get_bandage(block.id) if self.bandages is not None else None
        if bandage is None or not bandage.is_principal(block.id) or not bandage.extensions:
            return base

        extension_parts = _circular_parts(
            plane,
            bandage.extensions,
            lambda ext: ext.initial_position,
            lambda ext: (
                f"{stringify_angle(plane.get_theta_to(ext.initial_position))}"
                f"{EXTENSION_MARK}{self.get_topologic_id(ext)}"
            ),
        )
        return BANDAGE_SEPARATOR.join([base, *extension_parts])


class TopologicContext:
    """Sorted list of the distinct topology ids of a structure."""

    def __init__(self, ids: Iterable[str]):
        self.ids: list[str] = sorted(set(ids))
        self._index = {tid: i for i, tid in enumerate(self.ids)}

    def get_index(self, topologic_id: str) -> int:
        return self._index[topologic_id]

    def __len__(self) -> int:
        return len(self.ids)


class TopologicMap:
    """Topology class of the block found at each position, in reading order."""

    def __init__(self, context: TopologicContext, topologic_ids: Iterable[str]):
        self.context = context
        self.indices: list[int] = [context.get_index(tid) for tid in topologic_ids]

    def __str__(self) -> str:
        return ",".join(str(i) for i in self.indices)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TopologicMap):
            return NotImplemented
        return self.context.ids == other.context.ids and self.indices == other.indices


class TopologicMapper:
    """Topology map of a core; ids are rebuilt whenever the bandages change."""

    def __init__(self, core, builder: AngularTopologyBuilder | None = None):
        self.core = core
        self.builder = builder if builder is not None else AngularTopologyBuilder(core.bandages)
        self._context: TopologicContext | None = None
        self._ids: dict[str, str] = {}
        self._bandages_key: tuple = ()

    def _current_bandages_key(self) -> tuple:
        return tuple((b.principal.id, tuple(e.id for e in b.extensions)) for b in self.core.bandages.bandages)

    def _mapped_blocks(self) -> list[Block]:
        blocks = []
        for block in self.core.blocks:
            bandage = self.core.bandages.get_bandage(block.id)
            if bandage is None or bandage.is_principal(block.id):
                blocks.append(block)
        return blocks

    def get_context(self) -> TopologicContext:
        key = self._current_bandages_key()
        if self._context is None or key != self._bandages_key:
            self._ids = {b.id: self.builder.get_topologic_id(b) for b in self._mapped_blocks()}
            self._context = TopologicContext(self._ids.values())
            self._bandages_key = key
        return self._context

    def get_map(self) -> TopologicMap:
        context = self.get_context()
        ordered = sorted(self._mapped_blocks(), key=cmp_to_key(lambda a, b: compare_positions(a.position, b.position)))
        return TopologicMap(context, [self._ids[b.id] for b in ordered])
