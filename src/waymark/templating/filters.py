"""Template filters used by the breadcrumb macro.

Auto-registered on environments from ``create_environment()``. Register
``BUILTIN_FILTERS`` yourself when adding the macros to another kida
environment.
"""

import html
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from kida.template import Markup

from waymark.trail import BreadcrumbSegment


@dataclass(frozen=True, slots=True)
class CrumbItem:
    """A segment prepared for rendering.

    ``href`` is cleared on the current (last) item: the page you are on
    is never a link, whatever the segment carried.
    """

    label: str
    href: str | None
    icon: str | None
    current: bool


def crumbs(trail: Iterable[BreadcrumbSegment] | None) -> list[CrumbItem]:
    """Turn a trail (or ``None``) into render items.

    Example:
        {% for item in breadcrumbs | crumbs %}...{% end %}
    """
    if trail is None:
        return []
    segments = list(trail)
    last = len(segments) - 1
    return [
        CrumbItem(
            label=segment.label,
            href=None if index == last else segment.href,
            icon=segment.icon,
            current=index == last,
        )
        for index, segment in enumerate(segments)
    ]


def attr(value: Any, name: str) -> str | Markup:
    """Output an HTML attribute when value is truthy, else empty string.

    Example:
        <li{{ "page" | attr("aria-current") }}>
        → <li aria-current="page">
    """
    if not value:
        return ""
    return Markup(f' {name}="{html.escape(str(value))}"')


BUILTIN_FILTERS: dict[str, Callable[..., Any]] = {
    "attr": attr,
    "crumbs": crumbs,
}
