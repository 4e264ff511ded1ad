"""Label resolution — translated label first, fallback literal second.

Translators are injected callables ``(key) -> str``. The resolver never
looks one up from global state, so the same node resolves identically
for the same translator on every call.

Usage::

    t = catalog_translator({"navigation": {"about": "Über uns"}})
    resolve_label(node, t)          # "Über uns"
    resolve_label(node)             # node.fallback_label
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

from waymark.routing.route import RouteNode

logger = logging.getLogger("waymark.labels")

# Injected translation capability: full dotted key -> translated text
Translator: TypeAlias = Callable[[str], str]


def resolve_label(node: RouteNode, translate: Translator | None = None) -> str:
    """Return the display label for *node*.

    Uses ``translate(node.label_key)`` when a translator is given and it
    returns a non-empty string. A translator raising ``LookupError`` for
    an unknown key counts as no translation. Otherwise returns
    ``node.fallback_label``.
    """
    if translate is None:
        return node.fallback_label
    try:
        translated = translate(node.label_key)
    except LookupError:
        logger.debug("No translation for %r, using fallback label", node.label_key)
        return node.fallback_label
    if isinstance(translated, str) and translated.strip():
        return translated
    return node.fallback_label


def catalog_translator(messages: Mapping[str, Any]) -> Translator:
    """Build a translator over a nested message catalogue.

    Dotted keys walk nested mappings::

        t = catalog_translator({"navigation": {"home": "Home"}})
        t("navigation.home")     # "Home"
        t("navigation.missing")  # ""
    """

    def translate(key: str) -> str:
        value: Any = messages
        for part in key.split("."):
            if not isinstance(value, Mapping) or part not in value:
                return ""
            value = value[part]
        return value if isinstance(value, str) else ""

    return translate


def scoped(translate: Translator, namespace: str) -> Translator:
    """Adapt a namespace-scoped translator to full dotted keys.

    A scoped translator answers ``t("home")`` for the ``navigation``
    catalogue. Route labels carry full keys (``navigation.home``), so
    the namespace prefix is stripped before the call. Keys from other
    namespaces translate to ``""`` and fall back.
    """
    prefix = f"{namespace}."

    def translate_full(key: str) -> str:
        if not key.startswith(prefix):
            return ""
        return translate(key[len(prefix) :])

    return translate_full
