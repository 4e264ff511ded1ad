"""Routing — immutable route node table with declaration-order matching.

Nodes are declared once at startup and validated into a read-only table
shared by every request.
"""

from waymark.routing.pattern import fill_path, normalize_path, parse_path
from waymark.routing.route import PathSegment, RouteMatch, RouteNode
from waymark.routing.table import RouteTable

__all__ = [
    "PathSegment",
    "RouteMatch",
    "RouteNode",
    "RouteTable",
    "fill_path",
    "normalize_path",
    "parse_path",
]
