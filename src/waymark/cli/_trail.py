"""``waymark trail`` — preview the breadcrumb trail for a runtime path."""

import argparse
import json
import sys
from pathlib import Path

from waymark.cli._resolve import resolve_table
from waymark.config import TrailConfig
from waymark.errors import ConfigurationError, NoMatch
from waymark.labels import Translator, catalog_translator
from waymark.trail import build_from_match


def _load_translator(path: str | None) -> Translator | None:
    if path is None:
        return None
    messages = json.loads(Path(path).read_text(encoding="utf-8"))
    return catalog_translator(messages)


def run_trail(args: argparse.Namespace) -> None:
    """Print the trail for ``args.path``; exit 1 when nothing matches."""
    try:
        table = resolve_table(args.table)
        translate = _load_translator(args.messages)
    except (
        ModuleNotFoundError,
        AttributeError,
        TypeError,
        ConfigurationError,
        OSError,
        ValueError,
    ) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        match = table.resolve(args.path)
    except NoMatch as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    trail = build_from_match(table, match, translate)

    if args.json:
        print(json.dumps({"route": match.node.path, "params": match.params, "trail": trail.as_dicts()}))
        return

    config = TrailConfig(separator=args.separator)
    parts = [f"{s.label} <{s.href}>" if s.href else s.label for s in trail]
    print(config.separator.join(parts))
