"""External collaborators consumed by the render core.

This package provides the narrow interfaces the core calls out to:
- storage: Unviewed session ids (SessionStorage) and an in-memory store
- routing: Base path resolution for the results UI
- environment: Clock and host name for report headers
"""

from .environment import DEFAULT_ENVIRONMENT, HostEnvironment
from .routing import BasePathResolver, ensure_trailing_slash, static_base_path, to_absolute
from .storage import InMemoryStorage, SessionStorage

__all__ = [
    "DEFAULT_ENVIRONMENT",
    "BasePathResolver",
    "HostEnvironment",
    "InMemoryStorage",
    "SessionStorage",
    "ensure_trailing_slash",
    "static_base_path",
    "to_absolute",
]
