"""Core domain models.

The store and the schedule helpers operate on these types. Every model is
frozen: a state change always produces a new snapshot, never an in-place edit.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


# Longest duration a timedelta can hold, in whole minutes
MAX_DURATION_MINUTES = timedelta.max // timedelta(minutes=1)


def new_mission_id() -> str:
    return uuid4().hex


class PrepMission(BaseModel):
    """A named preparation task that has to happen before the adventure."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_mission_id)
    name: str = Field(min_length=1)
    duration_minutes: int = Field(ge=0, le=MAX_DURATION_MINUTES, strict=True)

    @property
    def label(self) -> str:
        return f"{self.name} ({self.duration_minutes}')"


class AdventureState(BaseModel):
    """One consistent moment of the adventure-planning session."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    time_input_visible: bool = False
    target_time: datetime | None = None  # naive, local wall-clock
    prep_missions: tuple[PrepMission, ...] = ()

    @property
    def can_request_time(self) -> bool:
        """The time picker is only offered once the adventure has a title."""
        return bool(self.title)

    @property
    def total_prep_minutes(self) -> int:
        return sum(m.duration_minutes for m in self.prep_missions)

    @property
    def next_mission_number(self) -> int:
        return len(self.prep_missions) + 1
