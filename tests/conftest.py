"""Shared fixtures for waymark tests."""

import pytest

from waymark.routing.route import RouteNode
from waymark.routing.table import RouteTable


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def about_table() -> RouteTable:
    """A small table: /about with a changelog child."""
    return RouteTable(
        [
            RouteNode("/about", "navigation.about", "About"),
            RouteNode("/about/changelog", "navigation.changelog", "Changelog", parent="/about"),
        ]
    )


@pytest.fixture
def creators_table() -> RouteTable:
    """Creators root, a breadcrumb-only portfolio chain, and submissions."""
    return RouteTable(
        [
            RouteNode("/creators", "navigation.creators", "Creators", icon="users"),
            RouteNode(
                "/creators/{creatorid}",
                "navigation.profile",
                "Profile",
                parent="/creators",
            ),
            RouteNode(
                "/creators/{creatorid}/portfolio",
                "navigation.portfolio",
                "Portfolio",
                icon="briefcase",
                parent="/creators/{creatorid}",
            ),
            RouteNode(
                "/creators/{creatorid}/s/{submissionid}",
                "navigation.submission",
                "Submission",
                parent="/creators/{creatorid}/portfolio",
            ),
            RouteNode(
                "/creators/{creatorid}/s/{submissionid}/edit",
                "navigation.edit",
                "Edit",
                parent="/creators/{creatorid}/s/{submissionid}",
            ),
        ]
    )
