"""Breadcrumb rendering with kida.

Ships a ``breadcrumb`` macro under ``waymark/breadcrumb.html``::

    {% from "waymark/breadcrumb.html" import breadcrumb %}
    {{ breadcrumb(breadcrumbs) }}

Add ``PackageLoader("waymark.templating", "macros")`` to an existing
environment, or use ``create_environment()``.
"""

from waymark.templating.filters import BUILTIN_FILTERS, CrumbItem, attr, crumbs
from waymark.templating.integration import create_environment, render_trail

__all__ = [
    "BUILTIN_FILTERS",
    "CrumbItem",
    "attr",
    "create_environment",
    "crumbs",
    "render_trail",
]
