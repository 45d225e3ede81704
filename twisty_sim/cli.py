"""CLI entrypoint for the twisty puzzle simulator."""

from __future__ import annotations

import argparse
import logging

from .config import RunConfig, apply_rotations, build_core, load_config
from .errors import ConfigError, RotationRejectedError
from .layouts import create_core
from .logging_config import setup_logging
from .solved_check import (
    AlterationType,
    count_alterations,
    get_difference_ratios,
    is_solved_orientation_invariant,
)
from .topology import TopologicMapper

CORE_TAGS = ["Rubik[2]", "Rubik[3]", "Skewb"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Twisty puzzle rotation simulator")
    parser.add_argument("--log-level", default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", type=str, default=None)
    sub = parser.add_subparsers(dest="mode", required=True)

    describe = sub.add_parser("describe", help="List the blocks and axes of a core")
    describe.add_argument("--core", default="Rubik[3]", choices=CORE_TAGS)

    topology = sub.add_parser("topology", help="Print topology ids and the topology map of a core")
    topology.add_argument("--core", default="Rubik[3]", choices=CORE_TAGS)

    run = sub.add_parser("run", help="Apply the rotations of a YAML run file")
    run.add_argument("config", type=str)

    return parser


def _describe(tag: str) -> None:
    core = create_core(tag)
    print(f"{tag}: {len(core.blocks)} blocks, {len(core.axes)} axes")
    for block in core.blocks:
        faces = " ".join(face.id for face in block.faces)
        print(f"  block {block.id:<8} at {block.initial_position}  faces: {faces}")
    for axis in core.axes:
        print(f"  axis  {axis.id:<8} along {axis.vector}  layers: {len(axis.layers)}")


def _topology(tag: str) -> None:
    core = create_core(tag)
    mapper = TopologicMapper(core)
    context = mapper.get_context()
    for index, tid in enumerate(context.ids):
        print(f"  [{index}] {tid}")
    print(f"map: {mapper.get_map()}")


def _run(config: RunConfig) -> int:
    core = build_core(config)
    try:
        applied = apply_rotations(core, config)
    except RotationRejectedError as exc:
        print(f"Move not allowed: {exc}")
        return 1

    counts = count_alterations(core)
    print(f"{config.core}: applied {applied} rotations")
    print(f"solved: {is_solved_orientation_invariant(core)}")
    for kind in (AlterationType.NONE, AlterationType.POSITION, AlterationType.ORIENTATION):
        print(f"  {kind.name.lower():<12} {counts.get(kind, 0)}")

    ratios = get_difference_ratios(create_core(config.core), core)
    print(
        f"ratios: unchanged={ratios.unchanged} rotated={ratios.rotated} "
        f"replaced={ratios.replaced} moved={ratios.moved}"
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = None
    if args.mode == "run":
        try:
            config = load_config(args.config)
        except ConfigError as exc:
            parser.error(str(exc))

    level_name = args.log_level or (config.log_level if config is not None else "WARNING")
    setup_logging(getattr(logging, level_name), args.log_file)

    if args.mode == "describe":
        _describe(args.core)
        return 0

    if args.mode == "topology":
        _topology(args.core)
        return 0

    if args.mode == "run":
        try:
            return _run(config)
        except ConfigError as exc:
            parser.error(str(exc))

    parser.error(f"Unsupported mode: {args.mode}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
