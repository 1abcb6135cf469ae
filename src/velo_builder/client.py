"""Client code and command-line entry point.

Usage:
    velo-builder                              # three-mode walkthrough
    velo-builder --mode full --builder custom_shop
    velo-builder --mode custom --steps roue,roue,cadre --json
    velo-builder --list-builders
"""

from __future__ import annotations

import argparse
import logging
from typing import Callable

from velo_builder.builders.base import RetrievableBuilder
from velo_builder.builders.decathlon import DecathlonBuilder
from velo_builder.config import load_settings
from velo_builder.director import Director
from velo_builder.exceptions import UnknownPartError, VeloBuilderError
from velo_builder.models.enums import PartKind
from velo_builder.models.velo import Velo
from velo_builder.registry import BuilderRegistry
from velo_builder.serialization import to_json_list, to_json_string

logger = logging.getLogger(__name__)

MODES = ("demo", "minimal", "full", "custom")


def parse_steps(text: str) -> tuple[PartKind, ...]:
    """Parse ``"guidon,roue"`` into PartKinds; blank entries are skipped."""
    kinds: list[PartKind] = []
    for raw in text.split(","):
        name = raw.strip()
        if not name:
            continue
        try:
            kinds.append(PartKind[name.upper()])
        except KeyError:
            raise UnknownPartError(name) from None
    return tuple(kinds)


def client_code(
    director: Director,
    builder: RetrievableBuilder | None = None,
    out: Callable[[str], None] = print,
) -> tuple[Velo, Velo, Velo]:
    """Walk through the three ways of building a velo.

    The client creates the builder, hands it to the director and starts the
    construction; the finished product is always collected from the builder.
    The last walkthrough drives the builder directly, since the Director is
    optional.
    """
    if builder is None:
        builder = DecathlonBuilder()
    director.set_builder(builder)

    out("Standard basic velo:")
    director.build_minimal_viable_product()
    basic = builder.get_product()
    out(basic.describe())

    out("Standard full featured velo:")
    director.build_full_featured_product()
    full = builder.get_product()
    out(full.describe())

    out("Custom velo:")
    builder.produce_guidon()
    builder.produce_roue()
    custom = builder.get_product()
    out(custom.describe())

    return basic, full, custom


def build_one(builder: RetrievableBuilder, mode: str, steps: tuple[PartKind, ...] = ()) -> Velo:
    """Build a single velo with *builder* in the given non-demo mode."""
    if mode == "custom":
        for kind in steps:
            builder.produce(kind)
    else:
        director = Director()
        director.set_builder(builder)
        if mode == "minimal":
            director.build_minimal_viable_product()
        else:
            director.build_full_featured_product()
    return builder.get_product()


def _build_parser(default_builder: str, default_steps: str) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="velo-builder", description="Assemble velos with the Builder pattern")
    p.add_argument("--builder", default=default_builder, help=f"Builder id (default: {default_builder})")
    p.add_argument("--mode", choices=MODES, default="demo", help="What to build (default: demo)")
    p.add_argument(
        "--steps",
        default=default_steps,
        help=f"Comma-separated parts for --mode custom (default: {default_steps})",
    )
    p.add_argument("--json", action="store_true", help="Print products as JSON")
    p.add_argument("--list-builders", action="store_true", help="List registered builders and exit")
    return p


def run(args: argparse.Namespace, registry: BuilderRegistry) -> int:
    if args.list_builders:
        for builder_id in registry.builder_ids:
            print(f"{builder_id}\t{registry.get(builder_id).description}")
        return 0

    builder = registry.create(args.builder)
    logger.info("Building %s velo(s) with %s", args.mode, args.builder)

    if args.mode == "demo":
        if args.json:
            velos = client_code(Director(), builder, out=lambda _line: None)
            print(to_json_list(velos, args.builder))
        else:
            client_code(Director(), builder)
        return 0

    steps = parse_steps(args.steps) if args.mode == "custom" else ()
    velo = build_one(builder, args.mode, steps)
    if args.json:
        print(to_json_string(velo, args.builder))
    else:
        print(velo.describe())
    return 0


def main(argv: list[str] | None = None) -> int:
    settings = load_settings()
    parser = _build_parser(settings.default_builder, settings.custom_steps)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    registry = BuilderRegistry()
    registry.discover_builders()

    try:
        return run(args, registry)
    except VeloBuilderError as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
