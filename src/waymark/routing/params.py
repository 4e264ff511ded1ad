"""Path placeholder converters.

Built-in converters for placeholder segments like ``{id:int}``.
"""

import re

# (regex_pattern, python_type) for each supported converter
CONVERTERS: dict[str, tuple[str, type]] = {
    "str": (r"[^/]+", str),
    "int": (r"\d+", int),
    "float": (r"\d+(?:\.\d+)?", float),
}


def compile_converter(param_type: str) -> re.Pattern[str]:
    """Return the regex for *param_type*, applied with ``fullmatch``.

    Raises ``KeyError`` if *param_type* is not a registered converter.
    """
    pattern, _ = CONVERTERS[param_type]
    return re.compile(pattern)


def convert_param(value: str, param_type: str) -> str | int | float:
    """Convert a captured placeholder string to the target type.

    Raises ``ValueError`` if the string cannot be converted.
    Raises ``KeyError`` if *param_type* is not a registered converter.
    """
    _, target_type = CONVERTERS[param_type]
    return target_type(value)
