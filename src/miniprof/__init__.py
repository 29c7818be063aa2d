"""miniprof: render completed profiling sessions.

Produced interfaces:
- render_plain_text / render_html: text reports of a session tree
- render_includes_payload: bootstrap payload for the results UI
- parse_client_timings: browser-submitted timings to ClientTimings
"""

__version__ = "0.1.0"

from .core import (  # noqa: E402
    RenderCoordinator,
    parse_client_timings,
    render_html,
    render_includes_payload,
    render_plain_text,
)

__all__ = [
    "RenderCoordinator",
    "__version__",
    "parse_client_timings",
    "render_html",
    "render_includes_payload",
    "render_plain_text",
]
