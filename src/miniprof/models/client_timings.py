"""Client timing models for browser-submitted performance data."""

from pydantic import BaseModel, Field


class ClientTiming(BaseModel):
    """A single browser-side timing.

    Attributes:
        name: Display name (e.g. "Dom Content Loaded Event").
        start: Milliseconds since navigation start.
        duration: Milliseconds, or None for a point-in-time event.
    """

    name: str
    start: float = Field(description="Milliseconds since navigation start")
    duration: float | None = Field(default=None, description="Duration, None for point events")


class ClientTimings(BaseModel):
    """Ordered browser-side timings for one page load."""

    redirect_count: int = Field(default=0, description="Redirects before the page loaded")
    timings: list[ClientTiming] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.timings)
