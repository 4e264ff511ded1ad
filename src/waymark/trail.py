"""Breadcrumb trail building.

Two entry points, both pure given their inputs:

- ``build_from_runtime_path()`` — match a runtime path and walk the
  matched node's parent chain. No match returns ``None`` (render nothing).
- ``build_from_parent_of()`` — for pages whose final label comes from
  fetched data. Builds the ancestors of a registered node and appends
  the caller's segments verbatim. An unregistered path is a
  ``ConfigurationError``.

``Breadcrumbs`` binds both to one table and a ``TrailConfig``.

Trails are rebuilt for every call and never cached: labels depend on
the caller's translator and overrides depend on the caller's data.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from waymark.config import TrailConfig
from waymark.errors import ConfigurationError, MissingDynamicParam
from waymark.labels import Translator, resolve_label, scoped
from waymark.routing.pattern import fill_path, normalize_path
from waymark.routing.route import RouteMatch, RouteNode
from waymark.routing.table import RouteTable

logger = logging.getLogger("waymark.trail")


@dataclass(frozen=True, slots=True)
class BreadcrumbSegment:
    """One entry of a trail. Segments without ``href`` render as plain text."""

    label: str
    href: str | None = None
    icon: str | None = None

    def as_dict(self) -> dict[str, str]:
        data = {"label": self.label}
        if self.href is not None:
            data["href"] = self.href
        if self.icon is not None:
            data["icon"] = self.icon
        return data


@dataclass(frozen=True, slots=True)
class BreadcrumbTrail:
    """Root-first sequence of segments, current page last."""

    segments: tuple[BreadcrumbSegment, ...] = ()

    @property
    def current(self) -> BreadcrumbSegment | None:
        """The "you are here" segment, or ``None`` for an empty trail."""
        return self.segments[-1] if self.segments else None

    def extend(self, *segments: BreadcrumbSegment) -> BreadcrumbTrail:
        """Return a new trail with *segments* appended."""
        return BreadcrumbTrail((*self.segments, *segments))

    def as_dicts(self) -> list[dict[str, str]]:
        """JSON-ready representation, omitting absent ``href``/``icon``."""
        return [segment.as_dict() for segment in self.segments]

    def __iter__(self) -> Iterator[BreadcrumbSegment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __getitem__(self, index: int) -> BreadcrumbSegment:
        return self.segments[index]

    def __bool__(self) -> bool:
        return bool(self.segments)


def _ancestor_href(
    node: RouteNode,
    params: Mapping[str, str],
    *,
    honour_link: bool,
) -> str | None:
    """Link for *node* when it sits above the current page.

    Placeholders are filled from *params*. A missing value drops the link
    rather than emitting a broken one.
    """
    if honour_link and not node.link:
        return None
    try:
        return fill_path(node.link_target, params)
    except MissingDynamicParam as exc:
        logger.debug("Dropping breadcrumb link for %r: %s", node.path, exc)
        return None


def _ancestor_segments(
    table: RouteTable,
    node: RouteNode,
    params: Mapping[str, str],
    translate: Translator | None,
    *,
    honour_link: bool,
) -> list[BreadcrumbSegment]:
    return [
        BreadcrumbSegment(
            label=resolve_label(ancestor, translate),
            href=_ancestor_href(ancestor, params, honour_link=honour_link),
            icon=ancestor.icon,
        )
        for ancestor in table.ancestors(node)
    ]


def build_from_runtime_path(
    table: RouteTable,
    path: str,
    translate: Translator | None = None,
) -> BreadcrumbTrail | None:
    """Build the trail for a runtime path.

    Returns ``None`` when no node matches. Otherwise returns the matched
    node's ancestors followed by the node itself: N ancestors give N+1
    segments. Ancestors link to their own path with placeholders filled
    from the match; the final segment has no link.
    """
    match = table.match(path)
    if match is None:
        return None
    return build_from_match(table, match, translate)


def build_from_match(
    table: RouteTable,
    match: RouteMatch,
    translate: Translator | None = None,
) -> BreadcrumbTrail:
    """Build the trail for a match already obtained from *table*."""
    segments = _ancestor_segments(table, match.node, match.params, translate, honour_link=True)
    segments.append(
        BreadcrumbSegment(
            label=resolve_label(match.node, translate),
            icon=match.node.icon,
        )
    )
    return BreadcrumbTrail(tuple(segments))


def build_from_parent_of(
    table: RouteTable,
    path: str,
    extra: Iterable[BreadcrumbSegment] = (),
    translate: Translator | None = None,
    *,
    params: Mapping[str, str] | None = None,
) -> BreadcrumbTrail:
    """Build the ancestors of the node registered at *path*, then append *extra*.

    *path* is the declared pattern (``/creators/{creatorid}/portfolio``),
    not a runtime value. The node itself is not included: the caller's
    *extra* segments stand in for it, typically carrying a fetched title.
    *extra* is appended verbatim. *params* fills placeholders in ancestor
    links; without it, placeholder ancestors render as plain text.

    Ancestors always link here, even nodes declared with ``link=False``.

    Raises ``ConfigurationError`` if *path* is not registered.
    """
    node = table.lookup_by_exact_path(path)
    if node is None:
        msg = (
            f"No route registered at {normalize_path(path)!r}. Pages building "
            f"breadcrumbs from a parent path need a matching route table entry."
        )
        raise ConfigurationError(msg)

    segments = _ancestor_segments(table, node, params or {}, translate, honour_link=False)
    segments.extend(extra)
    return BreadcrumbTrail(tuple(segments))


class Breadcrumbs:
    """Breadcrumb engine bound to one route table and configuration.

    The table is held by reference and never modified, so a single
    instance serves every request::

        crumbs = Breadcrumbs(default_table(), TrailConfig(hidden_paths=("/",)))
        crumbs.for_path("/about/terms", t)
    """

    __slots__ = ("_config", "_table")

    def __init__(self, table: RouteTable, config: TrailConfig | None = None) -> None:
        self._table = table
        self._config = config or TrailConfig()

    @property
    def table(self) -> RouteTable:
        return self._table

    @property
    def config(self) -> TrailConfig:
        return self._config

    def is_hidden(self, path: str) -> bool:
        """Return ``True`` if *path* is configured to render no breadcrumbs."""
        path = normalize_path(path)
        if path in {normalize_path(p) for p in self._config.hidden_paths}:
            return True
        for prefix in self._config.hidden_prefixes:
            prefix = normalize_path(prefix)
            if path == prefix or path.startswith(prefix.rstrip("/") + "/"):
                return True
        return False

    def for_path(self, path: str, translate: Translator | None = None) -> BreadcrumbTrail | None:
        """``build_from_runtime_path()`` honouring hidden paths."""
        if self.is_hidden(path):
            return None
        return build_from_runtime_path(self._table, path, translate)

    def from_parent_of(
        self,
        path: str,
        extra: Iterable[BreadcrumbSegment] = (),
        translate: Translator | None = None,
        *,
        params: Mapping[str, str] | None = None,
    ) -> BreadcrumbTrail:
        """``build_from_parent_of()`` against the bound table."""
        return build_from_parent_of(self._table, path, extra, translate, params=params)

    def label_for(self, path: str, translate: Translator | None = None) -> str | None:
        """Resolved label of the node declared at *path*, or ``None``."""
        node = self._table.lookup_by_exact_path(path)
        if node is None:
            return None
        return resolve_label(node, translate)

    def context(self, path: str, translate: Translator | None = None) -> dict[str, Any]:
        """Template context for a page: ``{"breadcrumbs": trail-or-None}``."""
        return {"breadcrumbs": self.for_path(path, translate)}

    def scope(self, translate: Translator) -> Translator:
        """Adapt a translator scoped to ``config.namespace`` to full label keys."""
        return scoped(translate, self._config.namespace)
