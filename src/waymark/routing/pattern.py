"""Path pattern parsing, normalization and placeholder substitution."""

from collections.abc import Mapping

from waymark.errors import ConfigurationError, MissingDynamicParam
from waymark.routing.params import CONVERTERS
from waymark.routing.route import PathSegment


def split_path(path: str) -> list[str]:
    """Split *path* on ``/``, dropping empty parts.

    ``""``, ``"/"`` and ``"//"`` all split to ``[]``; trailing slashes
    vanish.
    """
    return [part for part in path.split("/") if part]


def normalize_path(path: str) -> str:
    """Return the canonical ``/a/b`` form of *path* (``/`` when empty)."""
    return "/" + "/".join(split_path(path))


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route path pattern into segments.

    Examples::

        "/about"                      -> [PathSegment("about")]
        "/creators/{creatorid}"       -> [PathSegment("creators"), PathSegment("{creatorid}", is_param=True, ...)]
        "/prompt/{week:int}"          -> [..., PathSegment("{week:int}", is_param=True, param_type="int")]

    Raises ``ConfigurationError`` for ``[param]`` or ``<param>`` segments,
    for unknown converters and for a placeholder name used twice.
    """
    segments: list[PathSegment] = []
    seen: set[str] = set()
    for part in split_path(path):
        if (part.startswith("[") and part.endswith("]")) or (
            part.startswith("<") and part.endswith(">")
        ):
            msg = (
                f"Route path {path!r} uses {part!r}. Waymark placeholders are "
                f"written {{param}}, not [param] or <param>."
            )
            raise ConfigurationError(msg)
        if part.startswith("{") and part.endswith("}"):
            inner = part[1:-1]
            if ":" in inner:
                param_name, param_type = inner.split(":", 1)
            else:
                param_name = inner
                param_type = "str"
            if not param_name:
                msg = f"Route path {path!r} has an unnamed placeholder."
                raise ConfigurationError(msg)
            if param_type not in CONVERTERS:
                msg = (
                    f"Route path {path!r} uses unknown converter {param_type!r}. "
                    f"Available: {', '.join(sorted(CONVERTERS))}."
                )
                raise ConfigurationError(msg)
            if param_name in seen:
                msg = f"Route path {path!r} repeats placeholder {param_name!r}."
                raise ConfigurationError(msg)
            seen.add(param_name)
            segments.append(
                PathSegment(
                    value=part,
                    is_param=True,
                    param_name=param_name,
                    param_type=param_type,
                )
            )
        else:
            segments.append(PathSegment(value=part))
    return segments


def is_dynamic(path: str) -> bool:
    """Return ``True`` if *path* contains at least one placeholder."""
    return any(seg.is_param for seg in parse_path(path))


def fill_path(path: str, params: Mapping[str, str]) -> str:
    """Substitute placeholder segments of *path* with values from *params*.

    Example::

        fill_path("/creators/{creatorid}/portfolio", {"creatorid": "jane"})
        # -> "/creators/jane/portfolio"

    Raises ``MissingDynamicParam`` when a placeholder has no (non-empty)
    value in *params*.
    """
    parts: list[str] = []
    for seg in parse_path(path):
        if not seg.is_param:
            parts.append(seg.value)
            continue
        name = seg.param_name or ""
        value = params.get(name)
        if not value:
            raise MissingDynamicParam(path, name)
        parts.append(str(value))
    return "/" + "/".join(parts)
