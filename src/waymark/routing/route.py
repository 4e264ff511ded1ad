"""RouteNode, RouteMatch and PathSegment frozen dataclasses."""

from dataclasses import dataclass

from waymark.routing.params import convert_param


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Literal:     ``/creators``        (is_param=False)
    Placeholder: ``/{creatorid}``     (is_param=True, param_name="creatorid")
    Typed:       ``/{page:int}``      (is_param=True, param_name="page", param_type="int")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_type: str = "str"


@dataclass(frozen=True, slots=True)
class RouteNode:
    """A declared entry in the navigation hierarchy.

    Nodes are plain configuration values. They become navigable once a
    ``RouteTable`` validates them together.

    Attributes:
        path: Path pattern, e.g. ``/creators/{creatorid}/portfolio``.
        label_key: Dotted translation key, e.g. ``navigation.portfolio``.
        fallback_label: Literal label used when no translation is available.
        icon: Opaque icon identifier passed through to renderers.
        parent: Path of the enclosing breadcrumb node, ``None`` for roots.
            Need not be a string prefix of ``path``.
        name: Optional symbolic key for lookups by name.
        link: When ``False`` the node is plain text when it appears as an
            ancestor in a runtime-path trail.
        href: Link target used instead of ``path`` (for breadcrumb-only
            nodes that have no page of their own).
    """

    path: str
    label_key: str
    fallback_label: str
    icon: str | None = None
    parent: str | None = None
    name: str | None = None
    link: bool = True
    href: str | None = None

    @property
    def link_target(self) -> str:
        """The pattern a breadcrumb link to this node points at."""
        return self.href or self.path


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful path match."""

    node: RouteNode
    params: dict[str, str]

    def typed_params(self) -> dict[str, str | int | float]:
        """Return ``params`` converted by each placeholder's converter."""
        from waymark.routing.pattern import parse_path

        types = {
            seg.param_name: seg.param_type
            for seg in parse_path(self.node.path)
            if seg.is_param and seg.param_name is not None
        }
        return {name: convert_param(value, types.get(name, "str")) for name, value in self.params.items()}
