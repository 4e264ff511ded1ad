"""Tests for waymark.routing.pattern — parsing, normalization, substitution."""

import pytest

from waymark.errors import ConfigurationError, MissingDynamicParam
from waymark.routing.pattern import fill_path, is_dynamic, normalize_path, parse_path, split_path


class TestSplitPath:
    def test_empty_and_root(self) -> None:
        assert split_path("") == []
        assert split_path("/") == []

    def test_trailing_slash(self) -> None:
        assert split_path("/about/changelog/") == ["about", "changelog"]

    def test_repeated_slashes(self) -> None:
        assert split_path("//about//terms") == ["about", "terms"]


class TestNormalizePath:
    def test_root(self) -> None:
        assert normalize_path("") == "/"
        assert normalize_path("/") == "/"

    def test_trailing_slash(self) -> None:
        assert normalize_path("/about/") == "/about"

    def test_missing_leading_slash(self) -> None:
        assert normalize_path("about/terms") == "/about/terms"


class TestParsePath:
    def test_literal(self) -> None:
        segments = parse_path("/about")
        assert len(segments) == 1
        assert segments[0].value == "about"
        assert segments[0].is_param is False

    def test_placeholder(self) -> None:
        segments = parse_path("/creators/{creatorid}/portfolio")
        assert [s.is_param for s in segments] == [False, True, False]
        assert segments[1].param_name == "creatorid"
        assert segments[1].param_type == "str"

    def test_typed_placeholder(self) -> None:
        segments = parse_path("/prompt/{week:int}")
        assert segments[1].param_name == "week"
        assert segments[1].param_type == "int"

    def test_root(self) -> None:
        assert parse_path("/") == []

    def test_rejects_bracket_placeholder(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            parse_path("/creators/[creatorid]")
        assert "{param}" in str(exc_info.value)
        assert "/creators/[creatorid]" in str(exc_info.value)

    def test_rejects_angle_placeholder(self) -> None:
        with pytest.raises(ConfigurationError):
            parse_path("/share/<slug>")

    def test_rejects_unknown_converter(self) -> None:
        with pytest.raises(ConfigurationError, match="unknown converter"):
            parse_path("/files/{name:path}")

    def test_rejects_unnamed_placeholder(self) -> None:
        with pytest.raises(ConfigurationError, match="unnamed"):
            parse_path("/creators/{}")

    def test_rejects_repeated_placeholder_name(self) -> None:
        with pytest.raises(ConfigurationError, match="repeats placeholder 'id'"):
            parse_path("/creators/{id}/s/{id}")

    def test_repeated_name_rejected_across_converters(self) -> None:
        with pytest.raises(ConfigurationError, match="repeats"):
            parse_path("/prompt/{week:int}/{week}")


class TestIsDynamic:
    def test_literal(self) -> None:
        assert is_dynamic("/about/terms") is False

    def test_dynamic(self) -> None:
        assert is_dynamic("/s/{code}") is True


class TestFillPath:
    def test_literal_path_unchanged(self) -> None:
        assert fill_path("/about/terms/", {}) == "/about/terms"

    def test_substitutes(self) -> None:
        path = fill_path("/creators/{creatorid}/s/{submissionid}", {"creatorid": "jane", "submissionid": "42"})
        assert path == "/creators/jane/s/42"

    def test_typed_placeholder(self) -> None:
        assert fill_path("/prompt/{week:int}", {"week": "7"}) == "/prompt/7"

    def test_extra_params_ignored(self) -> None:
        assert fill_path("/creators/{creatorid}", {"creatorid": "jane", "other": "x"}) == "/creators/jane"

    def test_missing_param(self) -> None:
        with pytest.raises(MissingDynamicParam) as exc_info:
            fill_path("/creators/{creatorid}/portfolio", {})
        assert exc_info.value.param == "creatorid"

    def test_empty_value_counts_as_missing(self) -> None:
        with pytest.raises(MissingDynamicParam):
            fill_path("/creators/{creatorid}", {"creatorid": ""})

    def test_root(self) -> None:
        assert fill_path("/", {}) == "/"
