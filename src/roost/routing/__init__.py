"""Routing: endpoint-keyed route table built once from route modules.

Route lookup is exact on ``"<METHOD> <path>"``; there are no path
parameters or wildcards.
"""

from roost.routing.loader import discover_route_files, load_route_modules
from roost.routing.route import Route, endpoint_key, parse_endpoint
from roost.routing.table import CompiledRoute, RouteTable

__all__ = [
    "CompiledRoute",
    "Route",
    "RouteTable",
    "discover_route_files",
    "endpoint_key",
    "load_route_modules",
    "parse_endpoint",
]
