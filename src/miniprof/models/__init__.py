"""Pydantic data models for miniprof.

This package defines the data structures rendered and produced:
- Profiling trees (Session, Timing, CustomTiming)
- Browser-submitted timings (ClientTiming, ClientTimings)
- Presentation payloads (RenderOptions, RenderPosition, IncludesPayload)

Example:
    >>> from miniprof.models import Session, Timing
    >>> session = Session(root=Timing(name="GET /", duration_milliseconds=12.5))
    >>> session.model_dump_json()
"""

from .client_timings import ClientTiming, ClientTimings
from .custom_timing import CustomTiming
from .render import IncludesPayload, RenderOptions, RenderPosition
from .session import Session
from .timing import Timing

__all__ = [
    "ClientTiming",
    "ClientTimings",
    "CustomTiming",
    "IncludesPayload",
    "RenderOptions",
    "RenderPosition",
    "Session",
    "Timing",
]
