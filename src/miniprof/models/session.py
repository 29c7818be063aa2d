"""Session model for a completed profiling run."""

from datetime import UTC, datetime
from typing import Self
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, model_validator

from .timing import Timing


class Session(BaseModel):
    """One complete profiling run rooted at a single Timing.

    Sessions are produced by the capture side and only read here.

    Attributes:
        id: Unique session identifier.
        name: Session name, usually the request path.
        user: Owning user identifier, None for anonymous.
        started: When capture started (UTC).
        machine_name: Host that captured the session.
        has_user_viewed: Whether storage has marked the session viewed.
        root: Top-level Timing.
    """

    id: UUID = Field(default_factory=uuid4)
    name: str | None = Field(default=None, description="Session name")
    user: str | None = Field(default=None, description="Owning user, None if anonymous")
    started: datetime = Field(default_factory=lambda: datetime.now(UTC))
    machine_name: str | None = Field(default=None, description="Capturing host")
    has_user_viewed: bool = Field(default=False)
    root: Timing

    @model_validator(mode="after")
    def stamp_depths(self) -> Self:
        """Set the root to depth 0 and every descendant one below its parent.

        Runs once per session, in a single pass over the tree.
        """
        self.root.depth = 0
        pending = [self.root]
        while pending:
            node = pending.pop()
            for child in node.children:
                child.depth = node.depth + 1
                pending.append(child)
        return self

    @property
    def duration_milliseconds(self) -> float:
        return self.root.duration_milliseconds
