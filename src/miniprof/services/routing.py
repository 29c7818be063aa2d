"""Base path resolution for the results UI."""

import re
from collections.abc import Callable

from ..constants import DEFAULT_APPLICATION_PATH

BasePathResolver = Callable[[], str]

_TRAILING_SLASHES = re.compile(r"/+$")


def ensure_trailing_slash(path: str) -> str:
    """Collapse any trailing slashes into exactly one.

    An empty path stays empty.
    """
    if not path:
        return ""
    return _TRAILING_SLASHES.sub("", path) + "/"


def to_absolute(path: str, application_path: str = DEFAULT_APPLICATION_PATH) -> str:
    """Resolve an app-relative ``~/`` path against the application root.

    Examples:
        >>> to_absolute("~/profiler", "/shop")
        '/shop/profiler'
        >>> to_absolute("/static/profiler")
        '/static/profiler'
    """
    if path == "~":
        return ensure_trailing_slash(application_path) or "/"
    if path.startswith("~/"):
        root = ensure_trailing_slash(application_path) or "/"
        return root + path[2:]
    return path


def static_base_path(route_base_path: str, application_path: str) -> BasePathResolver:
    """Build a resolver that always returns the configured route."""

    def resolve() -> str:
        return to_absolute(route_base_path, application_path)

    return resolve
