"""Tests for waymark.labels — two-tier label resolution."""

from waymark.labels import catalog_translator, resolve_label, scoped
from waymark.routing.route import RouteNode

NODE = RouteNode("/about", "navigation.about", "About")


class TestResolveLabel:
    def test_no_translator_uses_fallback(self) -> None:
        assert resolve_label(NODE) == "About"

    def test_translated(self) -> None:
        assert resolve_label(NODE, lambda key: "Über uns") == "Über uns"

    def test_translator_receives_label_key(self) -> None:
        seen: list[str] = []

        def translate(key: str) -> str:
            seen.append(key)
            return "x"

        resolve_label(NODE, translate)
        assert seen == ["navigation.about"]

    def test_empty_translation_falls_back(self) -> None:
        assert resolve_label(NODE, lambda key: "") == "About"

    def test_blank_translation_falls_back(self) -> None:
        assert resolve_label(NODE, lambda key: "   ") == "About"

    def test_lookup_error_falls_back(self) -> None:
        def translate(key: str) -> str:
            raise KeyError(key)

        assert resolve_label(NODE, translate) == "About"

    def test_deterministic(self) -> None:
        t = catalog_translator({"navigation": {"about": "À propos"}})
        assert resolve_label(NODE, t) == resolve_label(NODE, t) == "À propos"


class TestCatalogTranslator:
    def test_nested_lookup(self) -> None:
        t = catalog_translator({"navigation": {"home": "Home"}})
        assert t("navigation.home") == "Home"

    def test_deep_lookup(self) -> None:
        t = catalog_translator({"about": {"purpose": {"title": "Purpose"}}})
        assert t("about.purpose.title") == "Purpose"

    def test_missing_key(self) -> None:
        t = catalog_translator({"navigation": {"home": "Home"}})
        assert t("navigation.missing") == ""
        assert t("other.home") == ""

    def test_non_string_leaf(self) -> None:
        t = catalog_translator({"navigation": {"home": {"nested": "x"}}})
        assert t("navigation.home") == ""


class TestScoped:
    def test_strips_namespace(self) -> None:
        seen: list[str] = []

        def nav(key: str) -> str:
            seen.append(key)
            return key.upper()

        t = scoped(nav, "navigation")
        assert t("navigation.home") == "HOME"
        assert seen == ["home"]

    def test_keeps_nested_key(self) -> None:
        t = scoped(lambda key: key, "about")
        assert t("about.purpose.title") == "purpose.title"

    def test_other_namespace_is_empty(self) -> None:
        t = scoped(lambda key: "translated", "navigation")
        assert t("about.purpose.title") == ""

    def test_resolves_through_fallback(self) -> None:
        node = RouteNode("/about/purpose", "about.purpose.title", "Purpose")
        t = scoped(lambda key: "translated", "navigation")
        assert resolve_label(node, t) == "Purpose"
