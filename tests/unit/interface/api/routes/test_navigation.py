"""Unit tests for navigation helpers."""

import pytest

from threads.interface.api.routes.navigation import SIDEBAR_LINKS, is_active


@pytest.mark.parametrize(
    "pathname,route,expected",
    [
        ("/", "/", True),
        ("/search", "/", False),
        ("/search", "/search", True),
        ("/profile/ext-ada", "/profile", True),
        ("/communities/123", "/communities", True),
        ("/activity", "/profile", False),
    ],
)
def test_is_active(pathname, route, expected):
    assert is_active(pathname, route) is expected


def test_sidebar_routes():
    assert [link.route for link in SIDEBAR_LINKS] == [
        "/",
        "/search",
        "/activity",
        "/create-thread",
        "/communities",
        "/profile",
    ]


def test_home_only_active_on_root():
    active = [link.label for link in SIDEBAR_LINKS if is_active("/thread/1", link.route)]
    assert active == []
