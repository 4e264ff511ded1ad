"""Immutable route node table with declaration-order path matching.

Nodes are validated and compiled when the table is constructed. After
that the table is read-only and safe to share across requests and
threads.
"""

import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from waymark.errors import ConfigurationError, NoMatch
from waymark.routing.params import compile_converter
from waymark.routing.pattern import fill_path, normalize_path, parse_path, split_path
from waymark.routing.route import PathSegment, RouteMatch, RouteNode

logger = logging.getLogger("waymark.routing")


@dataclass(frozen=True, slots=True)
class _CompiledRoute:
    """A node with its parsed segments and placeholder regexes."""

    node: RouteNode
    segments: tuple[PathSegment, ...]
    # One entry per segment; None for literal segments
    regexes: tuple[re.Pattern[str] | None, ...]

    def match(self, parts: list[str]) -> dict[str, str] | None:
        params: dict[str, str] = {}
        for seg, regex, part in zip(self.segments, self.regexes, parts, strict=True):
            if regex is None:
                if seg.value != part:
                    return None
            elif regex.fullmatch(part):
                params[seg.param_name or ""] = part
            else:
                return None
        return params


def _compile(node: RouteNode) -> _CompiledRoute:
    segments = tuple(parse_path(node.path))
    regexes = tuple(compile_converter(seg.param_type) if seg.is_param else None for seg in segments)
    return _CompiledRoute(node=node, segments=segments, regexes=regexes)


class RouteTable:
    """Read-only catalogue of every navigable path.

    Usage::

        table = RouteTable([
            RouteNode("/about", "navigation.about", "About"),
            RouteNode("/about/changelog", "navigation.changelog", "Changelog", parent="/about"),
        ])
        match = table.match("/about/changelog/")

    Construction fails fast with ``ConfigurationError`` on duplicate
    paths or names, unknown parents, and parent cycles.
    """

    __slots__ = ("_buckets", "_by_name", "_by_path", "_nodes")

    def __init__(self, nodes: Iterable[RouteNode]) -> None:
        self._nodes: tuple[RouteNode, ...] = tuple(nodes)
        self._by_path: dict[str, RouteNode] = {}
        self._by_name: dict[str, RouteNode] = {}
        # Candidates grouped by segment count, in declaration order
        buckets: dict[int, list[_CompiledRoute]] = {}

        for node in self._nodes:
            path = normalize_path(node.path)
            if path in self._by_path:
                msg = f"Duplicate route path {node.path!r} in the route table."
                raise ConfigurationError(msg)
            self._by_path[path] = node

            if node.name is not None:
                if node.name in self._by_name:
                    msg = f"Duplicate route name {node.name!r} in the route table."
                    raise ConfigurationError(msg)
                self._by_name[node.name] = node

            compiled = _compile(node)
            buckets.setdefault(len(compiled.segments), []).append(compiled)

        self._buckets: dict[int, tuple[_CompiledRoute, ...]] = {
            count: tuple(routes) for count, routes in buckets.items()
        }
        self._check_parents()
        logger.debug("Route table built with %d nodes", len(self._nodes))

    def _check_parents(self) -> None:
        """Every parent must exist and every parent chain must end at a root."""
        for node in self._nodes:
            if node.parent is not None and normalize_path(node.parent) not in self._by_path:
                msg = f"Route {node.path!r} names unknown parent {node.parent!r}."
                raise ConfigurationError(msg)

        for node in self._nodes:
            seen: list[str] = []
            current: RouteNode | None = node
            while current is not None:
                path = normalize_path(current.path)
                if path in seen:
                    chain = " -> ".join([*seen, path])
                    msg = f"Parent cycle in the route table: {chain}"
                    raise ConfigurationError(msg)
                seen.append(path)
                current = self.parent_of(current)

    # -- Lookups --

    def lookup_by_exact_path(self, path: str) -> RouteNode | None:
        """Return the node declared at exactly *path*, or ``None``.

        Compares declared patterns, not runtime values:
        ``"/creators/{creatorid}"`` finds the profile node,
        ``"/creators/jane"`` does not.
        """
        return self._by_path.get(normalize_path(path))

    def all_nodes(self) -> tuple[RouteNode, ...]:
        """Return every node in declaration order."""
        return self._nodes

    def get(self, name: str) -> RouteNode:
        """Return the node registered under *name*.

        Raises ``KeyError`` for unknown names.
        """
        return self._by_name[name]

    def parent_of(self, node: RouteNode) -> RouteNode | None:
        """Return *node*'s breadcrumb parent, or ``None`` for roots."""
        if node.parent is None:
            return None
        return self._by_path[normalize_path(node.parent)]

    def ancestors(self, node: RouteNode) -> list[RouteNode]:
        """Return *node*'s ancestors root-first, excluding *node* itself."""
        chain: list[RouteNode] = []
        current = self.parent_of(node)
        while current is not None:
            chain.append(current)
            current = self.parent_of(current)
        chain.reverse()
        return chain

    def build_path(self, name: str, params: Mapping[str, str]) -> str:
        """Fill the placeholders of the node named *name*.

        Raises ``KeyError`` for unknown names and ``MissingDynamicParam``
        when *params* lacks a placeholder value.
        """
        return fill_path(self.get(name).path, params)

    # -- Matching --

    def match(self, path: str) -> RouteMatch | None:
        """Match a runtime path against the table.

        Returns a ``RouteMatch`` on success and ``None`` when no node
        matches. Candidates with the same segment count are tried in
        declaration order; the first full match wins.
        """
        parts = split_path(path)
        for compiled in self._buckets.get(len(parts), ()):
            params = compiled.match(parts)
            if params is not None:
                return RouteMatch(node=compiled.node, params=params)
        logger.debug("No route matches %r", path)
        return None

    def resolve(self, path: str) -> RouteMatch:
        """Like ``match()`` but raises ``NoMatch`` instead of returning ``None``."""
        result = self.match(path)
        if result is None:
            raise NoMatch(path)
        return result

    # -- Container protocol --

    def __iter__(self) -> Iterator[RouteNode]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and normalize_path(path) in self._by_path

    def __repr__(self) -> str:
        return f"<RouteTable {len(self._nodes)} nodes>"
