"""``wayfinder routes`` — list registered routes.

Resolves an import string to a RouteTable and prints every view model
and key with its primary route and all declared templates.
"""

import argparse
import sys

from wayfinder.cli._load import load_table
from wayfinder.errors import describe_target


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of TARGET, PRIMARY, and TEMPLATES."""
    try:
        table = load_table(args.table)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    collections = [*table.view_model_templates.items(), *table.keyed_templates.items()]
    if not collections:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str]] = []
    for target, collection in collections:
        patterns = ", ".join(t.pattern for t in collection.all_routes)
        rows.append((describe_target(target), collection.primary_route, patterns))

    max_target = max(max(len(r[0]) for r in rows), 6)  # "TARGET" header
    max_primary = max(max(len(r[1]) for r in rows), 7)  # "PRIMARY" header

    fmt = f"{{:<{max_target}}}  {{:<{max_primary}}}  {{}}"
    print(fmt.format("TARGET", "PRIMARY", "TEMPLATES"))
    sep_len = max_target + max_primary + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))

    for duplicate in table.duplicates:
        print(f"warning: {duplicate}", file=sys.stderr)
