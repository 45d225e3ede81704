"""Numeric tolerance policy and trigonometry helpers."""

from __future__ import annotations

import math

EPSILON = 1e-10
FULL_TURN = 2.0 * math.pi


def is_equal(a: float, b: float) -> bool:
    return abs(a - b) < EPSILON


def is_zero(a: float) -> bool:
    return abs(a) < EPSILON


def align_ratio_limits(d: float) -> float:
    """Clamp a cosine/sine ratio into [-1, 1], snapping drift to exact values."""
    if is_zero(d):
        return 0.0
    if d >= 1.0 or is_equal(d, 1.0):
        return 1.0
    if d <= -1.0 or is_equal(d, -1.0):
        return -1.0
    return d


def cos(rad: float) -> float:
    rad = rad % FULL_TURN
    half_turns = rad / math.pi
    if is_equal(half_turns, 0.5) or is_equal(half_turns, 1.5):
        return 0.0
    return math.cos(rad)


def sin(rad: float) -> float:
    rad = rad % FULL_TURN
    if is_zero(rad) or is_equal(rad, math.pi) or is_equal(rad, FULL_TURN):
        return 0.0
    return math.sin(rad)


def acos(d: float) -> float:
    return math.acos(align_ratio_limits(d))


def asin(d: float) -> float:
    return math.asin(align_ratio_limits(d))
