"""Roost CLI: inspect and check a routes directory.

Entry point registered as ``roost`` in ``pyproject.toml``::

    [project.scripts]
    roost = "roost.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``roost`` command."""
    parser = argparse.ArgumentParser(
        prog="roost",
        description="Roost: a request-dispatch pipeline for JSON APIs.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- roost routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the endpoints in a routes directory")
    routes_parser.add_argument("routes_dir", help="Directory of route modules")
    routes_parser.add_argument(
        "--attribute",
        default="routes",
        help="Module attribute holding the route mapping (default: routes)",
    )

    # -- roost check ------------------------------------------------------
    check_parser = subparsers.add_parser(
        "check", help="Load and compile every route, reporting configuration errors"
    )
    check_parser.add_argument("routes_dir", help="Directory of route modules")
    check_parser.add_argument(
        "--attribute",
        default="routes",
        help="Module attribute holding the route mapping (default: routes)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from roost.cli._routes import run_routes

        run_routes(args)
    elif args.command == "check":
        from roost.cli._routes import run_check

        run_check(args)
