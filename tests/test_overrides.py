"""Tests for waymark.overrides — dynamic trailing segments."""

from dataclasses import dataclass

import anyio
import pytest

from waymark.overrides import entity_segment, fetch_segment, titled
from waymark.trail import BreadcrumbSegment


@dataclass
class Submission:
    title: str | None


class TestTitled:
    def test_title(self) -> None:
        assert titled("Sunset Study", "Untitled") == BreadcrumbSegment("Sunset Study")

    def test_missing_title(self) -> None:
        assert titled(None, "Untitled").label == "Untitled"

    def test_blank_title(self) -> None:
        assert titled("   ", "Untitled").label == "Untitled"

    def test_href_and_icon(self) -> None:
        seg = titled("Jane", "Unknown", href="/creators/jane", icon="user")
        assert seg == BreadcrumbSegment("Jane", "/creators/jane", "user")


class TestEntitySegment:
    def test_object_record(self) -> None:
        seg = entity_segment(lambda key: Submission("Sunset"), "42", fallback="Untitled")
        assert seg.label == "Sunset"

    def test_mapping_record(self) -> None:
        seg = entity_segment(lambda key: {"name": "Jane"}, "jane", fallback="Unknown", field="name")
        assert seg.label == "Jane"

    def test_missing_record(self) -> None:
        seg = entity_segment(lambda key: None, "42", fallback="Untitled")
        assert seg.label == "Untitled"

    def test_lookup_error(self) -> None:
        records: dict[str, Submission] = {}
        seg = entity_segment(records.__getitem__, "42", fallback="Untitled")
        assert seg.label == "Untitled"

    def test_empty_field(self) -> None:
        seg = entity_segment(lambda key: Submission(None), "42", fallback="Untitled")
        assert seg.label == "Untitled"

    def test_other_errors_propagate(self) -> None:
        def broken(key: str) -> Submission:
            raise RuntimeError("database down")

        with pytest.raises(RuntimeError):
            entity_segment(broken, "42", fallback="Untitled")


@pytest.mark.anyio
async def test_fetch_segment() -> None:
    async def fetch(key: str) -> Submission:
        return Submission(f"Submission {key}")

    seg = await fetch_segment(fetch, "42", fallback="Untitled", href="/creators/jane/s/42")
    assert seg == BreadcrumbSegment("Submission 42", "/creators/jane/s/42")


@pytest.mark.anyio
async def test_fetch_segment_missing_record() -> None:
    async def fetch(key: str) -> None:
        return None

    seg = await fetch_segment(fetch, "42", fallback="Untitled")
    assert seg.label == "Untitled"


@pytest.mark.anyio
async def test_fetch_segment_lookup_error() -> None:
    async def fetch(key: str) -> Submission:
        raise KeyError(key)

    seg = await fetch_segment(fetch, "42", fallback="Unknown")
    assert seg.label == "Unknown"


@pytest.mark.anyio
async def test_fetch_segment_timeout() -> None:
    async def fetch(key: str) -> Submission:
        await anyio.sleep(1)
        return Submission("late")

    seg = await fetch_segment(fetch, "42", fallback="Untitled", timeout=0.01)
    assert seg.label == "Untitled"
