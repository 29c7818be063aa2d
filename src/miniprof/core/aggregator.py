"""Per-category aggregation of custom timings."""

from dataclasses import dataclass

from ..models import Timing


@dataclass(frozen=True)
class CustomTimingGroup:
    """Totals for one custom timing category under a single Timing."""

    category: str
    total_milliseconds: float
    count: int

    @property
    def unit(self) -> str:
        return "cmd" if self.count == 1 else "cmds"


def group_custom_timings(timing: Timing) -> list[CustomTimingGroup]:
    """Summarize a node's custom timings by category.

    Categories keep the node's mapping order. Nodes without custom
    timings return an empty list.
    """
    if not timing.has_custom_timings or timing.custom_timings is None:
        return []
    return [
        CustomTimingGroup(
            category=category,
            total_milliseconds=sum(ct.duration_milliseconds for ct in entries),
            count=len(entries),
        )
        for category, entries in timing.custom_timings.items()
    ]
