"""Custom timing model for categorized sub-measurements."""

from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class CustomTiming(BaseModel):
    """A sub-measurement attached to a Timing, e.g. one SQL command.

    Attributes:
        id: Unique identifier.
        command_string: Command text (SQL, URL, cache key).
        execute_type: How the command was executed (e.g. "ExecuteReader").
        stack_trace_snippet: Short call-site description.
        start_milliseconds: Offset from session start.
        duration_milliseconds: Time the command took.
    """

    id: UUID = Field(default_factory=uuid4)
    command_string: str = Field(default="", description="Command text")
    execute_type: str | None = Field(default=None, description="Execution kind")
    stack_trace_snippet: str | None = Field(default=None, description="Call-site snippet")
    start_milliseconds: float = Field(default=0.0, ge=0, description="Offset from session start")
    duration_milliseconds: float = Field(default=0.0, ge=0, description="Duration in ms")
