"""Twisty puzzle geometry and rotation simulator package."""

from .engine import RotationCore
from .errors import GeometricError, RotationRejectedError
from .layouts import create_core
from .solved_check import is_solved_orientation_invariant

__all__ = [
    "GeometricError",
    "RotationCore",
    "RotationRejectedError",
    "create_core",
    "is_solved_orientation_invariant",
]
