"""``waymark routes`` — list registered routes.

Prints every node with its path, fallback label and breadcrumb parent,
in declaration order.
"""

import argparse
import sys

from waymark.cli._resolve import resolve_table
from waymark.errors import ConfigurationError


def run_routes(args: argparse.Namespace) -> None:
    """Print a PATH / LABEL / PARENT table for ``args.table``."""
    try:
        table = resolve_table(args.table)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    nodes = table.all_nodes()
    if not nodes:
        print("No routes registered.")
        return

    rows = [(node.path, node.fallback_label, node.parent or "-") for node in nodes]

    max_path = max(max(len(r[0]) for r in rows), 4)  # "PATH" header
    max_label = max(max(len(r[1]) for r in rows), 5)  # "LABEL" header

    fmt = f"{{:<{max_path}}}  {{:<{max_label}}}  {{}}"
    print(fmt.format("PATH", "LABEL", "PARENT"))
    sep_len = max_path + max_label + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for path, label, parent in rows:
        print(fmt.format(path, label, parent))
