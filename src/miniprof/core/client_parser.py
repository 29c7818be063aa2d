"""Parsing of browser-submitted client timings.

The results UI posts window.performance data back as flat form fields:

    clientPerformance[timing][navigationStart] = 1767528000000
    clientPerformance[timing][domLoading]      = 1767528000120
    clientPerformance[timing][loadEventStart]  = 1767528000300
    clientPerformance[timing][loadEventEnd]    = 1767528000310
    clientPerformance[navigation][redirectCount] = 0
    clientProbes[0][n] = render grid
    clientProbes[0][d] = 1767528000150

Values are epoch milliseconds and are made relative to navigationStart.
This is best-effort telemetry: a field that can't be read is skipped and
the rest of the form is still used.
"""

import logging
import math
import re
from collections.abc import Mapping
from typing import Any

from ..models import ClientTiming, ClientTimings

logger = logging.getLogger(__name__)

TIMING_PREFIX = "clientPerformance[timing]["
PROBES_PREFIX = "clientProbes["
NAVIGATION_START = "navigationStart"
REDIRECT_COUNT_KEY = "clientPerformance[navigation][redirectCount]"

_WORD_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def sentence_case(name: str) -> str:
    """Split a camelCase name into capitalized words.

    Examples:
        >>> sentence_case("domContentLoadedEvent")
        'Dom Content Loaded Event'
    """
    words = _WORD_BOUNDARY.sub(" ", name)
    return words[:1].upper() + words[1:]


def _parse_number(raw: str | None) -> float | None:
    try:
        value = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None


def parse_client_timings(form: Mapping[str, str]) -> ClientTimings:
    """Build ClientTimings from flat form fields.

    Entries are ordered by where their first field appeared in ``form``.
    ``<name>Start``/``<name>End`` fields merge into one entry with a
    duration; probes sharing a name pair up in id order. Submissions
    without a positive navigationStart (e.g. AJAX requests) carry no page
    timings and produce an empty result.

    Args:
        form: Field name to raw string value, in submission order

    Returns:
        ClientTimings, empty rather than None when nothing usable was sent
    """
    navigation_start = _parse_number(form.get(TIMING_PREFIX + NAVIGATION_START + "]"))
    if navigation_start is None or navigation_start <= 0:
        if form:
            logger.debug("Client timings without navigationStart ignored")
        return ClientTimings()

    redirect_count = 0
    ranges: dict[str, dict[str, Any]] = {}
    probes: dict[int, dict[str, Any]] = {}
    entries: list[tuple[int, ClientTiming]] = []

    for order, (key, raw) in enumerate(form.items()):
        if key == REDIRECT_COUNT_KEY:
            try:
                redirect_count = int(raw)
            except (TypeError, ValueError):
                logger.debug(f"Skipping client field {key!r}: not an integer: {raw!r}")
            continue

        if key.startswith(TIMING_PREFIX) and key.endswith("]"):
            name = key[len(TIMING_PREFIX) : -1]
            if name == NAVIGATION_START:
                continue
            value = _parse_number(raw)
            if value is None:
                logger.debug(f"Skipping client field {key!r}: not a number: {raw!r}")
                continue
            value -= navigation_start
            # Unset marks arrive as 0, which lands before navigation start
            if value <= 0:
                continue
            if name.endswith("Start") and len(name) > 5:
                ranges.setdefault(name[:-5], {"order": order})["start"] = value
            elif name.endswith("End") and len(name) > 3:
                ranges.setdefault(name[:-3], {"order": order})["end"] = value
            else:
                entries.append((order, ClientTiming(name=sentence_case(name), start=value)))
            continue

        if key.startswith(PROBES_PREFIX):
            probe_id_text, closed, suffix = key[len(PROBES_PREFIX) :].partition("]")
            try:
                probe_id = int(probe_id_text)
            except ValueError:
                probe_id = None
            if probe_id is None or not closed or suffix not in ("[n]", "[d]"):
                logger.debug(f"Skipping client field {key!r}: malformed probe key")
                continue
            probe = probes.setdefault(probe_id, {"order": order})
            if suffix == "[n]":
                probe["name"] = raw
                continue
            value = _parse_number(raw)
            if value is None:
                logger.debug(f"Skipping client field {key!r}: not a number: {raw!r}")
            elif value > 0:
                probe["start"] = value - navigation_start
            continue

        logger.debug(f"Skipping client field {key!r}: unrecognized")

    for name, bounds in ranges.items():
        if "start" not in bounds:
            continue
        duration = bounds["end"] - bounds["start"] if "end" in bounds else None
        entry = ClientTiming(name=sentence_case(name), start=bounds["start"], duration=duration)
        entries.append((bounds["order"], entry))

    by_name: dict[str, list[dict[str, Any]]] = {}
    for probe_id in sorted(probes):
        probe = probes[probe_id]
        if "name" in probe and "start" in probe:
            by_name.setdefault(probe["name"], []).append(probe)
    for name, group in by_name.items():
        for first, second in zip(group[::2], group[1::2], strict=False):
            entry = ClientTiming(
                name=name, start=first["start"], duration=second["start"] - first["start"]
            )
            entries.append((first["order"], entry))

    entries.sort(key=lambda item: item[0])
    return ClientTimings(redirect_count=redirect_count, timings=[entry for _, entry in entries])
