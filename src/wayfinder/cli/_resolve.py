"""``wayfinder resolve`` — resolve a view model or key to a URI.

Uses a :class:`RecordingNavigator` at ``--base-uri`` so resolution runs
exactly as it would in the app, without navigating anywhere.
"""

import argparse
import sys

from wayfinder.cli._load import load_table, load_target
from wayfinder.config import NavigationConfig
from wayfinder.errors import RouteNotFound
from wayfinder.navigation.manager import NavigationManager
from wayfinder.testing import RecordingNavigator


def run_resolve(args: argparse.Namespace) -> None:
    """Print the URI ``args.target`` resolves to with ``args.parameters``."""
    try:
        table = load_table(args.table)
        target = load_target(args.target, key=args.key)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    config = table.config
    if args.base_path is not None:
        config = NavigationConfig(
            base_path=args.base_path,
            multi_route_templates=config.multi_route_templates,
            strict_templates=config.strict_templates,
        )

    manager = NavigationManager(table, RecordingNavigator(args.base_uri), config)
    try:
        print(manager.resolve(target, args.parameters))
    except RouteNotFound as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
