"""``roost routes`` and ``roost check``.

Both load and compile a routes directory exactly as ``create_api_server``
does; ``routes`` prints the resulting table, ``check`` only reports
whether it compiled.
"""

import argparse
import sys

from roost.errors import ConfigurationError
from roost.routing.loader import load_route_modules
from roost.routing.table import CompiledRoute, RouteTable


def _load_table(args: argparse.Namespace) -> RouteTable:
    """Build the route table, exiting with status 1 on any load error."""
    try:
        mappings = load_route_modules(args.routes_dir, attribute=args.attribute)
        return RouteTable.from_mappings(mappings)
    except (FileNotFoundError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def _flags(entry: CompiledRoute) -> str:
    route = entry.route
    flags: list[str] = []
    if route.respond is None:
        flags.append("no-respond")
    if route.authenticate:
        flags.append("auth")
    if route.parses_body(entry.method):
        flags.append("json")
    if route.limit is not None:
        flags.append(f"limit={route.limit}")
    if route.validate:
        flags.append("validate=" + ",".join(route.validate))
    if route.prepare is not None:
        flags.append("prepare")
    return " ".join(flags)


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of METHOD, PATH and route flags."""
    table = _load_table(args)
    if not len(table):
        print("No routes registered.")
        return

    rows = sorted(((e.method, e.path, _flags(e)) for e in table), key=lambda r: (r[1], r[0]))

    max_method = max(6, *(len(r[0]) for r in rows))  # "METHOD" header
    max_path = max(4, *(len(r[1]) for r in rows))  # "PATH" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "FLAGS"))
    sep_len = max_method + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for method, path, flags in rows:
        print(fmt.format(method, path, flags).rstrip())


def run_check(args: argparse.Namespace) -> None:
    """Compile every route; exit 1 with the first error if any fails."""
    table = _load_table(args)
    print(f"OK: {len(table)} route(s) compiled.")
