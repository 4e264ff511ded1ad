"""Waymark — route registry and breadcrumb resolution for server-rendered sites.

Declares every navigable path once, matches runtime paths against it,
and turns matches into localized breadcrumb trails.

Basic usage::

    from waymark import Breadcrumbs, RouteNode, RouteTable

    table = RouteTable([
        RouteNode("/about", "navigation.about", "About"),
        RouteNode("/about/changelog", "navigation.changelog", "Changelog", parent="/about"),
    ])
    crumbs = Breadcrumbs(table)
    crumbs.for_path("/about/changelog")
    # About </about> › Changelog

Dynamic final labels::

    from waymark import titled

    crumbs.from_parent_of(
        "/creators/{creatorid}/portfolio",
        [titled(creator_name, "Unknown")],
    )

Rendering (kida)::

    from waymark.templating import create_environment, render_trail
    html = render_trail(create_environment(), trail)
"""

__version__ = "0.1.0"
__all__ = [
    "BreadcrumbSegment",
    "BreadcrumbTrail",
    "Breadcrumbs",
    "ConfigurationError",
    "MissingDynamicParam",
    "NoMatch",
    "RouteMatch",
    "RouteNode",
    "RouteTable",
    "TrailConfig",
    "WaymarkError",
    "build_from_match",
    "build_from_parent_of",
    "build_from_runtime_path",
    "catalog_translator",
    "entity_segment",
    "fetch_segment",
    "resolve_label",
    "scoped",
    "titled",
]

_LAZY_IMPORTS: dict[str, str] = {
    "BreadcrumbSegment": "waymark.trail",
    "BreadcrumbTrail": "waymark.trail",
    "Breadcrumbs": "waymark.trail",
    "ConfigurationError": "waymark.errors",
    "MissingDynamicParam": "waymark.errors",
    "NoMatch": "waymark.errors",
    "RouteMatch": "waymark.routing.route",
    "RouteNode": "waymark.routing.route",
    "RouteTable": "waymark.routing.table",
    "TrailConfig": "waymark.config",
    "WaymarkError": "waymark.errors",
    "build_from_match": "waymark.trail",
    "build_from_parent_of": "waymark.trail",
    "build_from_runtime_path": "waymark.trail",
    "catalog_translator": "waymark.labels",
    "entity_segment": "waymark.overrides",
    "fetch_segment": "waymark.overrides",
    "resolve_label": "waymark.labels",
    "scoped": "waymark.labels",
    "titled": "waymark.overrides",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waymark`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
