"""Display options and payload models handed to the presentation layer."""

from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field


class RenderPosition(str, Enum):
    """Where the results popup button is drawn."""

    LEFT = "left"
    RIGHT = "right"
    BOTTOM_LEFT = "bottomleft"
    BOTTOM_RIGHT = "bottomright"


class RenderOptions(BaseModel):
    """Independent display toggles.

    Every field defaults to None, meaning the presentation layer picks
    its own default.
    """

    position: RenderPosition | None = None
    show_trivial: bool | None = None
    show_time_with_children: bool | None = None
    max_traces_to_show: int | None = Field(default=None, ge=1)
    show_controls: bool | None = None
    start_hidden: bool | None = None

    def merged_over(self, defaults: "RenderOptions") -> "RenderOptions":
        """Return options where unset fields fall back to ``defaults``."""
        values = {
            name: value if value is not None else getattr(defaults, name)
            for name, value in self
        }
        return RenderOptions(**values)


class IncludesPayload(BaseModel):
    """Everything the presentation layer needs to bootstrap the results UI.

    Attributes:
        path: Base path for fetching session data, ending in one "/".
        ids: Session ids to show, oldest unviewed first, current last.
        current_id: Id of the session being rendered.
        authorized: Whether the caller may view other users' results.
        options: Display toggles.
    """

    path: str
    ids: list[UUID]
    current_id: UUID
    authorized: bool
    options: RenderOptions = Field(default_factory=RenderOptions)

    def to_dict(self) -> dict[str, Any]:
        """Flatten to JSON-ready data, leaving out unset toggles."""
        data = self.model_dump(mode="json", exclude={"options"})
        data.update(self.options.model_dump(mode="json", exclude_none=True))
        return data
