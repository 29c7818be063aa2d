"""Timing model for nodes of a profiling session tree."""

from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from .custom_timing import CustomTiming


class Timing(BaseModel):
    """One measured operation in a profiling session.

    Children are kept in execution order. Depth is derived from nesting
    and stamped by the owning Session, so a child always sits one level
    below its parent whatever depth values were supplied.

    Attributes:
        id: Unique identifier.
        name: Operation name shown in reports.
        start_milliseconds: Offset from session start.
        duration_milliseconds: Time the operation took.
        depth: Nesting level, 0 for the root.
        children: Nested operations in execution order.
        custom_timings: Sub-measurements keyed by category (e.g. "sql").
    """

    id: UUID = Field(default_factory=uuid4)
    name: str = Field(description="Operation name")
    start_milliseconds: float = Field(default=0.0, ge=0, description="Offset from session start")
    duration_milliseconds: float = Field(default=0.0, ge=0, description="Duration in ms")
    depth: int = Field(default=0, ge=0, description="Nesting level")
    children: list["Timing"] = Field(default_factory=list)
    custom_timings: dict[str, list[CustomTiming]] | None = Field(default=None)

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    @property
    def has_custom_timings(self) -> bool:
        return bool(self.custom_timings)

    @property
    def duration_without_children_milliseconds(self) -> float:
        """Own time: duration minus direct children, never negative."""
        own = self.duration_milliseconds - sum(c.duration_milliseconds for c in self.children)
        return max(own, 0.0)
