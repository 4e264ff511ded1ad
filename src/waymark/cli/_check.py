"""``waymark check`` — route table validation command.

Building a ``RouteTable`` runs every consistency check (duplicate paths
and names, unknown parents, parent cycles). Exits with code 1 if any
fails.
"""

import argparse
import sys

from waymark.cli._resolve import resolve_table
from waymark.errors import ConfigurationError


def run_check(args: argparse.Namespace) -> None:
    """Validate ``args.table`` and report the node count."""
    try:
        table = resolve_table(args.table)
    except ConfigurationError as exc:
        print(f"Invalid route table: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"OK: {len(table)} routes")
