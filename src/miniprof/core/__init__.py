"""Render core for miniprof.

This package contains pure logic with no I/O:
- aggregator: Custom timing totals per category
- serializer: Plain-text and HTML-escaped session reports
- coordinator: Unviewed session ids and payload for the results UI
- client_parser: Browser-submitted timing fields to ClientTimings
"""

from .aggregator import CustomTimingGroup, group_custom_timings
from .client_parser import parse_client_timings, sentence_case
from .coordinator import AuthorizationPolicy, RenderCoordinator, render_includes_payload
from .serializer import (
    RenderMode,
    format_milliseconds,
    render_html,
    render_plain_text,
    serialize,
)

__all__ = [
    "AuthorizationPolicy",
    "CustomTimingGroup",
    "RenderCoordinator",
    "RenderMode",
    "format_milliseconds",
    "group_custom_timings",
    "parse_client_timings",
    "render_html",
    "render_includes_payload",
    "render_plain_text",
    "sentence_case",
    "serialize",
]
