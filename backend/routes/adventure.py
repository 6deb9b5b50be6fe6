"""Adventure session endpoints: title, time input, target time, prep missions."""

from typing import Any

from fastapi import APIRouter, HTTPException

from adventure_time.errors import (
    IndexOutOfRange,
    InvalidMission,
    InvalidTimeValue,
    MissionNotFound,
)
from adventure_time.schedule import format_clock
from backend import session

from .models import AddMission, ConfirmTimeBody, ReorderMission, TimeInputBody, UpdateTitle

router = APIRouter()


def adventure_view() -> dict[str, Any]:
    """Serialise the current snapshot with the derived start time and display text."""
    store = session.store()
    state = store.state
    fmt = session.config()["time_format"]
    start = store.start_time()

    view = state.model_dump(mode="json")
    for dumped, mission in zip(view["prep_missions"], state.prep_missions):
        dumped["label"] = mission.label
    view["start_time"] = start.isoformat() if start else None
    view["adventure_time_text"] = (
        f"Adventure set for {format_clock(state.target_time, fmt)}"
        if state.target_time else None
    )
    view["start_time_text"] = (
        f"You should start prepping at: {format_clock(start, fmt)}" if start else None
    )
    view["can_request_time"] = state.can_request_time
    view["next_mission_number"] = state.next_mission_number
    hour, minute = store.picker_default()
    view["picker_default"] = {"hour": hour, "minute": minute}
    return view


@router.get("/adventure")
async def get_adventure():
    """Get the current adventure snapshot and its recommended start time."""
    return adventure_view()


@router.put("/adventure/title")
async def set_title(body: UpdateTitle):
    """Rename the adventure."""
    session.store().set_title(body.title)
    return adventure_view()


@router.post("/adventure/time-input")
async def set_time_input(body: TimeInputBody):
    """Open or dismiss the time picker."""
    session.store().set_time_input_visible(body.visible)
    return adventure_view()


@router.post("/adventure/time")
async def confirm_time(body: ConfirmTimeBody):
    """Confirm the adventure time (today, local) and close the time picker."""
    try:
        session.store().confirm_target_time(body.hour, body.minute)
    except InvalidTimeValue as e:
        raise HTTPException(400, str(e))
    return adventure_view()


@router.post("/adventure/missions")
async def add_mission(body: AddMission):
    """Append a prep mission."""
    try:
        session.store().add_mission(body.name, body.duration)
    except InvalidMission as e:
        raise HTTPException(400, str(e))
    return adventure_view()


@router.post("/adventure/missions/reorder")
async def reorder_mission(body: ReorderMission):
    """Move a prep mission from one position to another."""
    try:
        session.store().reorder_mission(body.from_index, body.to_index)
    except IndexOutOfRange as e:
        raise HTTPException(404, str(e))
    return adventure_view()


@router.delete("/adventure/missions/{mission_id}")
async def remove_mission(mission_id: str):
    """Delete a single prep mission by id."""
    try:
        session.store().remove_mission(mission_id)
    except MissionNotFound as e:
        raise HTTPException(404, str(e))
    return adventure_view()


@router.post("/adventure/reset")
async def reset_adventure():
    """Discard the current plan and start over."""
    session.store().reset()
    return adventure_view()
