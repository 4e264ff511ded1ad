"""Dynamic trailing segments for pages whose label comes from stored data.

Page code fetches an entity (a submission, a creator, an exhibit), turns
it into a ``BreadcrumbSegment`` here, and hands it to
``build_from_parent_of()``. The trail builder appends such segments
without inspecting them. These helpers only cover the fetch-and-fallback
part::

    segment = await fetch_segment(load_submission, submission_id, fallback="Untitled")
    trail = crumbs.from_parent_of(
        "/creators/{creatorid}/s/{submissionid}", [segment], t,
        params=match.params,
    )

The engine itself never awaits; only ``fetch_segment`` does, and it
runs in the caller's request context.
"""

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

import anyio

from waymark.trail import BreadcrumbSegment

logger = logging.getLogger("waymark.overrides")


def _field_value(record: Any, field: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


def titled(
    title: str | None,
    fallback: str,
    *,
    href: str | None = None,
    icon: str | None = None,
) -> BreadcrumbSegment:
    """Segment labelled *title*, or *fallback* when the title is missing or blank."""
    label = title.strip() if isinstance(title, str) else ""
    return BreadcrumbSegment(label=label or fallback, href=href, icon=icon)


def entity_segment(
    lookup: Callable[[str], Any],
    key: str,
    *,
    fallback: str,
    field: str = "title",
    href: str | None = None,
    icon: str | None = None,
) -> BreadcrumbSegment:
    """Segment labelled from ``lookup(key)``'s *field*.

    *lookup* returns a record (mapping or object) or ``None``. A ``None``
    record, a ``LookupError`` from *lookup*, or a blank field all yield
    *fallback*.
    """
    try:
        record = lookup(key)
    except LookupError:
        logger.debug("Lookup for %r failed, using %r", key, fallback)
        record = None
    title = None if record is None else _field_value(record, field)
    return titled(title, fallback, href=href, icon=icon)


async def fetch_segment(
    fetch: Callable[[str], Awaitable[Any]],
    key: str,
    *,
    fallback: str,
    field: str = "title",
    timeout: float | None = None,
    href: str | None = None,
    icon: str | None = None,
) -> BreadcrumbSegment:
    """Async ``entity_segment()`` with an optional *timeout* in seconds.

    A missing record, a ``LookupError`` from *fetch*, or running past
    *timeout* yields *fallback*. Other exceptions propagate.
    """
    record: Any = None
    try:
        with anyio.fail_after(timeout):
            record = await fetch(key)
    except TimeoutError:
        logger.debug("Fetch for %r timed out after %ss, using %r", key, timeout, fallback)
    except LookupError:
        logger.debug("Fetch for %r failed, using %r", key, fallback)
    title = None if record is None else _field_value(record, field)
    return titled(title, fallback, href=href, icon=icon)
