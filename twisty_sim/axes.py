"""Rotation axes, layer separators and core faces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .planes import Plane
from .tolerance import is_zero
from .vectors import Vector3


@dataclass(frozen=True)
class LayerSeparator:
    id: str
    plane: Plane


@dataclass(frozen=True)
class CoreFace:
    id: str
    plane: Plane


@dataclass(frozen=True)
class LayerInterval:
    """Range of shells, 0 being the outermost one along the axis."""

    above: int
    below: int | None = None

    def __post_init__(self):
        if self.below is None:
            object.__setattr__(self, "below", self.above)
        if self.above < 0 or self.below < self.above:
            raise ValueError(f"Invalid layer interval ({self.above}, {self.below})")


OUTER_LAYER = LayerInterval(0)


class RotationAxis:
    """Directed axis through the puzzle center, with its ordered layer separators."""

    def __init__(self, axis_id: str, vector: Vector3, layers: Iterable[LayerSeparator] | None = None):
        if axis_id is None or not str(axis_id).strip():
            raise ValueError("Axis id cannot be empty")
        if vector.is_zero():
            raise ValueError(f"Axis '{axis_id}' vector cannot be a zero vector")

        self.id = axis_id
        self.vector = vector

        if layers is None:
            layers = [LayerSeparator(f"L_{axis_id}", Plane(vector, 0.0))]
        layers = list(layers)
        if not layers:
            raise ValueError(f"Axis '{axis_id}' needs at least one layer separator")
        self.layers: tuple[LayerSeparator, ...] = tuple(sorted(layers, key=self._offset, reverse=True))

    def _offset(self, layer: LayerSeparator) -> float:
        """Position where the separator crosses the axis, in axis units."""
        along = layer.plane.normal.dot(self.vector.normalize())
        if is_zero(along):
            raise ValueError(f"Layer '{layer.id}' does not cross axis '{self.id}'")
        return -layer.plane.d / along

    @classmethod
    def from_distances(cls, axis_id: str, vector: Vector3, distances: dict[str, float]) -> RotationAxis:
        """Build separators perpendicular to the axis from {layer id: plane d} pairs."""
        return cls(axis_id, vector, [LayerSeparator(lid, Plane(vector, d)) for lid, d in distances.items()])

    def get_upper_layer(self) -> LayerSeparator:
        return max(self.layers, key=lambda layer: abs(layer.plane.d))

    def get_layer(self, layer_id: str) -> LayerSeparator | None:
        for layer in self.layers:
            if layer.id == layer_id:
                return layer
        return None

    def contains_block(self, interval: LayerInterval, position: Vector3) -> bool:
        """True when the position lies strictly inside the shells of the interval."""
        if interval.below > len(self.layers):
            raise ValueError(f"Axis '{self.id}' has only {len(self.layers) + 1} shells, got {interval}")

        # Separator normals may not share the axis direction, so each side is
        # tested against the axis itself.
        if interval.below < len(self.layers) and not self._is_outside(self.layers[interval.below], position):
            return False
        if interval.above > 0 and not self._is_inside(self.layers[interval.above - 1], position):
            return False
        return True

    def _is_outside(self, layer: LayerSeparator, position: Vector3) -> bool:
        if layer.plane.normal.dot(self.vector) >= 0.0:
            return layer.plane.is_above_plane(position)
        return layer.plane.is_below_plane(position)

    def _is_inside(self, layer: LayerSeparator, position: Vector3) -> bool:
        if layer.plane.normal.dot(self.vector) >= 0.0:
            return layer.plane.is_below_plane(position)
        return layer.plane.is_above_plane(position)

    def __repr__(self) -> str:
        return f"RotationAxis({self.id!r}, {self.vector}, layers={[layer.id for layer in self.layers]})"
