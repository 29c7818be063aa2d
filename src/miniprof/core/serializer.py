"""Text reports for profiling sessions.

Walks the Timing tree in pre-order with an explicit stack, so arbitrarily
deep trees render without hitting the recursion limit. Each node becomes
one line prefixed by one marker per depth level:

    web01 at 2026-01-04 12:00:00 UTC
    Request = 120.5ms
    >Query = 45.25ms (sql = 45.25ms in 1 cmd)
"""

import html
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from ..constants import DEPTH_MARKER, HEADER_TIME_FORMAT
from ..models import Session, Timing
from ..services.environment import DEFAULT_ENVIRONMENT, HostEnvironment
from .aggregator import group_custom_timings

_HUNDREDTHS = Decimal("0.01")


class RenderMode(str, Enum):
    """How names are emitted."""

    HTML = "html"
    PLAIN = "plain"


def format_milliseconds(value: float) -> str:
    """Format with thousands separators and at most two decimals.

    Halves round away from zero and trailing zeros are dropped:
    0.125 -> "0.13", 1234.5 -> "1,234.5", 3.0 -> "3".
    """
    rounded = Decimal(str(value)).quantize(_HUNDREDTHS, rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        rounded = abs(rounded)
    return f"{rounded:,.2f}".rstrip("0").rstrip(".")


def _format_line(timing: Timing, escape: bool) -> str:
    name = html.escape(timing.name) if escape else timing.name
    duration = format_milliseconds(timing.duration_milliseconds)
    line = f"{DEPTH_MARKER * timing.depth}{name} = {duration}ms"
    for group in group_custom_timings(timing):
        category = html.escape(group.category) if escape else group.category
        line += (
            f" ({category} = {format_milliseconds(group.total_milliseconds)}ms"
            f" in {group.count} {group.unit})"
        )
    return line


def serialize(
    session: Session | None,
    mode: RenderMode,
    environment: HostEnvironment = DEFAULT_ENVIRONMENT,
) -> str:
    """Render ``session`` as one header line plus one line per Timing.

    Args:
        session: Completed session, or None
        mode: HTML escapes names and host; PLAIN leaves them as-is
        environment: Source of host name and current time for the header

    Returns:
        Newline-terminated report, or "" when there is no session
    """
    if session is None:
        return ""

    escape = mode is RenderMode.HTML
    host = environment.machine_name()
    timestamp = environment.utcnow().strftime(HEADER_TIME_FORMAT)
    lines = [f"{html.escape(host) if escape else host} at {timestamp}"]

    stack = [session.root]
    while stack:
        timing = stack.pop()
        lines.append(_format_line(timing, escape))
        # Reverse push keeps the first child on top
        stack.extend(reversed(timing.children))

    return "\n".join(lines) + "\n"


def render_html(
    session: Session | None, environment: HostEnvironment = DEFAULT_ENVIRONMENT
) -> str:
    """Return an HTML-escaped text report; "" when session is None."""
    return serialize(session, RenderMode.HTML, environment)


def render_plain_text(
    session: Session | None, environment: HostEnvironment = DEFAULT_ENVIRONMENT
) -> str:
    """Return an unescaped report suitable for consoles, logs and test output."""
    return serialize(session, RenderMode.PLAIN, environment)
