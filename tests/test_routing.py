"""Tests for base path helpers."""

import pytest

from miniprof.services.routing import ensure_trailing_slash, static_base_path, to_absolute


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/profiler", "/profiler/"),
        ("/profiler/", "/profiler/"),
        ("/profiler///", "/profiler/"),
        ("/", "/"),
        ("", ""),
    ],
)
def test_ensure_trailing_slash(path: str, expected: str) -> None:
    """Trailing slashes collapse to exactly one."""
    assert ensure_trailing_slash(path) == expected


@pytest.mark.parametrize(
    ("path", "application_path", "expected"),
    [
        ("~/profiler", "/", "/profiler"),
        ("~/profiler", "/shop", "/shop/profiler"),
        ("~/profiler", "/shop/", "/shop/profiler"),
        ("~", "/shop", "/shop/"),
        ("/static/profiler", "/shop", "/static/profiler"),
    ],
)
def test_to_absolute(path: str, application_path: str, expected: str) -> None:
    """'~' resolves against the application root; absolute paths pass through."""
    assert to_absolute(path, application_path) == expected


def test_static_base_path() -> None:
    """The resolver returns the configured route each time."""
    resolve = static_base_path("~/prof", "/app")
    assert resolve() == "/app/prof"
    assert resolve() == "/app/prof"
