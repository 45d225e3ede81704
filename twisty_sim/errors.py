"""Exception types raised by the twisty simulator."""

from __future__ import annotations


class TwistyError(Exception):
    """Base class for simulator errors."""


class GeometricError(TwistyError, ArithmeticError):
    """Raised when a geometric construction has no solution (parallel inputs, zero divisor)."""


class RotationRejectedError(TwistyError, RuntimeError):
    """Raised when a rotation validator refuses a rotation."""

    def __init__(self, axis_id: str, theta: float, block_ids: list[str]):
        self.axis_id = axis_id
        self.theta = theta
        self.block_ids = block_ids
        super().__init__(
            f"Rotation around '{axis_id}' by {theta:.6f} rad is not allowed for blocks {block_ids}"
        )


class ConfigError(TwistyError, ValueError):
    """Raised when a run configuration file is invalid."""
