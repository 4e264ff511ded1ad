"""Table import resolution — resolves ``"module:attribute"`` strings to route tables.

Shared utility used by every ``waymark`` subcommand.
"""

import importlib
from collections.abc import Iterable

from waymark.routing.route import RouteNode
from waymark.routing.table import RouteTable


def resolve_table(import_string: str) -> RouteTable:
    """Resolve an import string to a ``RouteTable``.

    Accepts ``"module:attribute"`` format. When the attribute portion is
    omitted, defaults to ``"table"``.

    The attribute may be a ``RouteTable``, an iterable of ``RouteNode``
    (validated into a table here), or a factory returning either.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a table or nodes.
        ConfigurationError: If the nodes do not form a valid table.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "table"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, RouteTable):
        obj = obj()

    if isinstance(obj, RouteTable):
        return obj

    if isinstance(obj, Iterable) and not isinstance(obj, (str, bytes)):
        nodes = list(obj)
        if all(isinstance(node, RouteNode) for node in nodes):
            return RouteTable(nodes)

    msg = f"{import_string!r} resolved to {type(obj).__name__}, not a RouteTable or RouteNode sequence"
    raise TypeError(msg)
