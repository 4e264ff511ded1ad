"""Waymark exception hierarchy.

Shared across the route table, matcher, trail builder and CLI so every
module raises and catches the same types.
"""


class WaymarkError(Exception):
    """Base for all waymark-specific errors."""


class ConfigurationError(WaymarkError):
    """Raised when the route registry is inconsistent.

    Duplicate paths, unknown parents, parent cycles, and pages asking for
    a trail from a path that was never registered all land here.
    Typically raised at startup or surfaced by tests, never handled at
    request time.
    """


class NoMatch(WaymarkError):  # noqa: N818
    """No registered route matches a runtime path.

    An expected outcome: ``RouteTable.match()`` returns ``None`` instead.
    Only the strict ``RouteTable.resolve()`` raises it.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No route matches {path!r}")


class MissingDynamicParam(WaymarkError):  # noqa: N818
    """A path pattern needs a placeholder value that was not supplied.

    Raised by ``fill_path()``. The trail builder catches it and emits the
    affected segment without an ``href``.
    """

    def __init__(self, path: str, param: str) -> None:
        self.path = path
        self.param = param
        super().__init__(f"Missing value for {{{param}}} in {path!r}")
