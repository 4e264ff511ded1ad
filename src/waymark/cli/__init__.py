"""Waymark CLI — inspect and validate route tables, preview trails.

Entry point registered as ``waymark`` in ``pyproject.toml``::

    [project.scripts]
    waymark = "waymark.cli:main"
"""

import argparse
import sys

from waymark.config import TrailConfig

DEFAULT_TABLE = "waymark.navigation:default_table"


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``waymark`` command."""
    parser = argparse.ArgumentParser(
        prog="waymark",
        description="Waymark — route registry and breadcrumb resolution.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- waymark routes ---------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "table",
        nargs="?",
        default=DEFAULT_TABLE,
        help="Import string of a route table (e.g. myapp.nav:table)",
    )

    # -- waymark check ----------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate a route table")
    check_parser.add_argument(
        "table",
        nargs="?",
        default=DEFAULT_TABLE,
        help="Import string of a route table (e.g. myapp.nav:table)",
    )

    # -- waymark trail ----------------------------------------------------
    trail_parser = subparsers.add_parser("trail", help="Show the breadcrumb trail for a path")
    trail_parser.add_argument("path", help="Runtime path (e.g. /creators/jane/portfolio/edit)")
    trail_parser.add_argument(
        "--table",
        default=DEFAULT_TABLE,
        help="Import string of a route table (e.g. myapp.nav:table)",
    )
    trail_parser.add_argument(
        "--messages",
        default=None,
        help="JSON message catalogue used to translate labels",
    )
    trail_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the trail as JSON",
    )
    trail_parser.add_argument(
        "--separator",
        default=TrailConfig().separator,
        help="String placed between segments in text output",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from waymark.cli._routes import run_routes

        run_routes(args)
    elif args.command == "check":
        from waymark.cli._check import run_check

        run_check(args)
    elif args.command == "trail":
        from waymark.cli._trail import run_trail

        run_trail(args)
