"""Wayfinder CLI — inspect route tables and resolve navigation targets.

Entry point registered as ``wayfinder`` in ``pyproject.toml``::

    [project.scripts]
    wayfinder = "wayfinder.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wayfinder`` command."""
    parser = argparse.ArgumentParser(
        prog="wayfinder",
        description="Wayfinder — view-model navigation for subpath-hosted apps.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wayfinder routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "table",
        help="Import string for a RouteTable (e.g. myapp.navigation:table)",
    )

    # -- wayfinder resolve ------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Resolve a view model or key to a URI")
    resolve_parser.add_argument(
        "table",
        help="Import string for a RouteTable (e.g. myapp.navigation:table)",
    )
    resolve_parser.add_argument(
        "target",
        help="Key string, or module:Class for a view model",
    )
    resolve_parser.add_argument(
        "--key",
        action="store_true",
        help="Treat TARGET as a key even if it contains ':'",
    )
    resolve_parser.add_argument(
        "parameters",
        nargs="?",
        default=None,
        help="Parameter string (e.g. 1/101?sort=desc)",
    )
    resolve_parser.add_argument(
        "--base-uri",
        default="http://localhost/",
        help="Base URI the app is served from",
    )
    resolve_parser.add_argument(
        "--base-path",
        default=None,
        help="Static hosting prefix (overrides the base URI's path)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from wayfinder.cli._routes import run_routes

        run_routes(args)
    elif args.command == "resolve":
        from wayfinder.cli._resolve import run_resolve

        run_resolve(args)
