"""
g2io command line interface.

Usage
-----
    g2io generate -o chain/3 -i tree/7 -l first -f dot
    g2io generators -k undirected
    g2io linkers
    g2io display-engines
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Optional, Sequence

from pydantic import ValidationError

from g2io import __version__
from g2io.config import GenerationConfig
from g2io.core.errors import UserInputError
from g2io.core.graph import EdgeKind
from g2io.display import list_display_engines
from g2io.engine.runner import GenerationRunner
from g2io.generators import list_generators
from g2io.linkers import list_linkers

logger = logging.getLogger(__name__)

LOGGING_LEVELS = ("debug", "info", "warning", "error", "critical")

_LISTINGS = {
    "generators": (list_generators, "List the available graph generators."),
    "linkers": (list_linkers, "List the available linkers."),
    "display-engines": (list_display_engines, "List the available display engines."),
}


def format_listing(entries: list[dict[str, Any]]) -> str:
    """
    Lay out plugin names and descriptions in two aligned columns.

    Each plugin is followed by an empty line; continuation lines of a
    description are indented to the description column.
    """
    width = max((len(e["name"]) for e in entries), default=0) + 4
    lines: list[str] = []
    for entry in entries:
        description = entry["description"] or [""]
        lines.append(f"{entry['name']:<{width}}{description[0]}".rstrip())
        lines.extend(f"{'':<{width}}{line}" for line in description[1:])
        lines.append("")
    return "\n".join(lines) + ("\n" if lines else "")


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--logging-level", type=str, default="info", choices=LOGGING_LEVELS,
        help="Minimal level of the messages written to stderr.",
    )
    common.add_argument(
        "--edge-kind", "-k", type=str, default=EdgeKind.DIRECTED.value,
        choices=[k.value for k in EdgeKind],
        help="Whether the graphs are directed or undirected.",
    )

    parser = argparse.ArgumentParser(
        prog="g2io", description="Generate graphs made of inner graphs linked by an outer graph.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser(
        "generate", parents=[common], help="Generate an inner/outer graph.",
    )
    generate.add_argument("--outer", "-o", type=str, required=True, help="Outer graph generator, e.g. 'chain/3'.")
    generate.add_argument("--inner", "-i", type=str, required=True, help="Inner graph generator, e.g. 'tree/7'.")
    generate.add_argument("--linker", "-l", type=str, required=True, help="Linker, e.g. 'first' or 'random/0.1'.")
    generate.add_argument("--format", "-f", dest="display", type=str, default="graphml", help="Display engine (default: graphml).")
    generate.add_argument("--seed", "-s", type=int, default=None, help="64-bit seed (random if omitted).")
    generate.add_argument("--workers", "-w", type=int, default=None, help="Number of worker threads.")

    for name, (_, help_text) in _LISTINGS.items():
        subparsers.add_parser(name, parents=[common], help=help_text)

    return parser


def _generate(args: argparse.Namespace) -> None:
    config = GenerationConfig(
        outer=args.outer,
        inner=args.inner,
        linker=args.linker,
        edge_kind=args.edge_kind,
        display=args.display,
        seed=args.seed,
        workers=args.workers,
    )
    runner = GenerationRunner(config)
    graph = runner.run()
    runner.write(graph, sys.stdout)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.logging_level.upper()),
        format="%(levelname)s | %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.command == "generate":
            _generate(args)
        else:
            list_fn, _ = _LISTINGS[args.command]
            sys.stdout.write(format_listing(list_fn(EdgeKind(args.edge_kind))))
    except UserInputError as e:
        logger.error("%s", e)
        sys.exit(1)
    except ValidationError as e:
        logger.error("Invalid configuration: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
