"""Kida environment setup for breadcrumb rendering.

Creates a kida Environment that can load waymark's macros alongside an
application's own templates, and renders trails to HTML.
"""

from pathlib import Path

from kida import ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from waymark.templating.filters import BUILTIN_FILTERS
from waymark.trail import BreadcrumbTrail

_RENDER_SOURCE = (
    '{% from "waymark/breadcrumb.html" import breadcrumb %}'
    "{{ breadcrumb(trail, label) }}"
)


def create_environment(
    template_dirs: tuple[str | Path, ...] = (),
    *,
    autoescape: bool = True,
) -> Environment:
    """Create a kida Environment with waymark's macros and filters.

    *template_dirs* are searched first, so an application can shadow
    ``waymark/breadcrumb.html`` with its own markup.
    """
    loaders = [FileSystemLoader(str(d)) for d in template_dirs]
    loaders.append(PackageLoader("waymark.templating", "macros"))

    env = Environment(
        loader=ChoiceLoader(loaders),
        autoescape=autoescape,
    )
    env.update_filters(BUILTIN_FILTERS)
    return env


def render_trail(
    env: Environment,
    trail: BreadcrumbTrail | None,
    label: str = "Breadcrumb",
) -> str:
    """Render *trail* with the ``breadcrumb`` macro.

    ``None`` and empty trails render as an empty string.
    """
    if not trail:
        return ""
    tpl = env.from_string(_RENDER_SOURCE)
    return tpl.render({"trail": trail, "label": label}).strip()
