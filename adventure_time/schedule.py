"""Time arithmetic for the adventure plan.

Target times are naive local wall-clock datetimes. The start time is found by
walking the prep missions backward from the target, one mission at a time:

    target 18:00, missions [Shower 15', Pack bag 10']
      18:00 - 15' = 17:45
      17:45 - 10' = 17:35   <- start prepping here
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta
from functools import reduce

from adventure_time.errors import InvalidMission, InvalidTimeValue
from adventure_time.models import MAX_DURATION_MINUTES, AdventureState, PrepMission

DEFAULT_TIME_FORMAT = "%I:%M %p"

_DURATION_RE = re.compile(r"[+-]?[0-9]+")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_clock(hour: int, minute: int) -> None:
    if not _is_int(hour) or not 0 <= hour <= 23:
        raise InvalidTimeValue(f"Hour must be an integer in 0..23, got {hour!r}")
    if not _is_int(minute) or not 0 <= minute <= 59:
        raise InvalidTimeValue(f"Minute must be an integer in 0..59, got {minute!r}")


def anchor_target_time(
    now: datetime,
    hour: int,
    minute: int,
    roll_to_next_day_if_past: bool = False,
) -> datetime:
    """Return hour:minute on the calendar day of `now`.

    A time that has already passed stays on today's date unless
    `roll_to_next_day_if_past` is set, in which case it moves to tomorrow.
    """
    validate_clock(hour, minute)
    target = now.replace(hour=hour, minute=minute, second=0, microsecond=0)
    if roll_to_next_day_if_past and target < now:
        target += timedelta(days=1)
    return target


def _step_back(moment: datetime, mission: PrepMission) -> datetime:
    return moment - timedelta(minutes=mission.duration_minutes)


def start_time_fits(target: datetime, total_minutes: int) -> bool:
    """Whether target minus total_minutes is still a representable datetime."""
    try:
        target - timedelta(minutes=total_minutes)
    except OverflowError:
        return False
    return True


def compute_start_time(state: AdventureState) -> datetime | None:
    """When to start prepping, or None while no target time is set."""
    if state.target_time is None:
        return None
    return reduce(_step_back, state.prep_missions, state.target_time)


def parse_duration(value: int | str) -> int:
    """Parse a mission duration in whole minutes.

    Accepts ints and decimal digit strings (surrounding whitespace ignored).
    Anything negative, fractional, non-numeric or longer than a timedelta can
    hold raises InvalidMission.
    """
    if _is_int(value):
        minutes = value
    elif isinstance(value, str):
        text = value.strip()
        if not _DURATION_RE.fullmatch(text):
            raise InvalidMission(f"Duration must be a whole number of minutes, got {value!r}")
        try:
            minutes = int(text)
        except ValueError as e:
            # more digits than int() will convert
            raise InvalidMission(f"Duration is too large: {len(text)} digits") from e
    else:
        raise InvalidMission(f"Duration must be a whole number of minutes, got {value!r}")
    if minutes < 0:
        raise InvalidMission(f"Duration cannot be negative, got {minutes}")
    if minutes > MAX_DURATION_MINUTES:
        raise InvalidMission(f"Duration is too large, got {minutes} minutes")
    return minutes


def format_clock(moment: datetime, fmt: str = DEFAULT_TIME_FORMAT) -> str:
    """12-hour clock text, e.g. "05:35 PM"."""
    return moment.strftime(fmt)


def default_picker_time(now: datetime) -> tuple[int, int]:
    """Initial (hour, minute) offered by the time picker: one hour from now."""
    return (now.hour + 1) % 24, now.minute
