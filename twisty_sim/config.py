"""YAML run files: which core to build, how to band it, which rotations to apply."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .axes import LayerInterval
from .engine import RotationCore
from .errors import ConfigError
from .layouts import create_core
from .vectors import degrees_to_radians

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class RotationStep:
    axis: str
    angle: float  # degrees
    layers: LayerInterval | None = None


@dataclass
class RunConfig:
    core: str
    log_level: str = "WARNING"
    bandages: list[tuple[str, str]] = field(default_factory=list)
    rotations: list[RotationStep] = field(default_factory=list)


def load_config(path: str | Path) -> RunConfig:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to read YAML '{path}': {exc}") from exc
    return parse_config(data)


def _parse_layers(value: Any, index: int) -> LayerInterval | None:
    if value is None:
        return None
    if isinstance(value, int):
        value = [value]
    if not isinstance(value, list) or not 1 <= len(value) <= 2 or not all(isinstance(v, int) for v in value):
        raise ConfigError(f"rotations[{index}].layers must be an index or an [above, below] pair")
    try:
        return LayerInterval(*value)
    except ValueError as exc:
        raise ConfigError(f"rotations[{index}].layers: {exc}") from exc


def _parse_rotation(item: Any, index: int) -> RotationStep:
    if not isinstance(item, dict) or "axis" not in item or "angle" not in item:
        raise ConfigError(f"rotations[{index}] must be a mapping with 'axis' and 'angle'")
    try:
        angle = float(item["angle"])
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"rotations[{index}].angle must be a number") from exc
    return RotationStep(str(item["axis"]), angle, _parse_layers(item.get("layers"), index))


def parse_config(data: Any) -> RunConfig:
    if not isinstance(data, dict):
        raise ConfigError("Top-level YAML must be a mapping")
    if not data.get("core"):
        raise ConfigError("Missing 'core' (e.g. 'Rubik[3]' or 'Skewb')")

    log_level = str(data.get("log_level", "WARNING")).upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}")

    bandages = []
    for index, pair in enumerate(data.get("bandages") or []):
        if not isinstance(pair, list) or len(pair) != 2:
            raise ConfigError(f"bandages[{index}] must be a [principal, extension] pair")
        bandages.append((str(pair[0]), str(pair[1])))

    rotations = [_parse_rotation(item, i) for i, item in enumerate(data.get("rotations") or [])]
    return RunConfig(core=str(data["core"]), log_level=log_level, bandages=bandages, rotations=rotations)


def build_core(config: RunConfig) -> RotationCore:
    """Create the configured core and band its blocks; rotations are not applied."""
    try:
        core = create_core(config.core)
        for principal, extension in config.bandages:
            core.bandages.band(principal, extension)
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc
    logger.info("Built %s with %d blocks and %d axes", config.core, len(core.blocks), len(core.axes))
    return core


def apply_rotations(core: RotationCore, config: RunConfig) -> int:
    """Apply the configured rotations in order; returns how many were applied."""
    for index, step in enumerate(config.rotations):
        if core.get_axis(step.axis) is None:
            raise ConfigError(f"rotations[{index}]: unknown axis '{step.axis}' for {config.core}")
        try:
            core.rotate_around(step.axis, degrees_to_radians(step.angle), step.layers)
        except ValueError as exc:
            raise ConfigError(f"rotations[{index}]: {exc}") from exc
    return len(config.rotations)
