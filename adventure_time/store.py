"""AdventureStore: owns the current snapshot and its state transitions.

Every operation reads the current AdventureState, builds a new one and hands
it to _publish(), the only place the snapshot reference changes. Listeners
run after the swap, so they always observe a complete snapshot. Failed
operations raise before _publish() and leave the old snapshot in place.

    store = AdventureStore()
    unsubscribe = store.subscribe(render)
    store.set_title("Beach day")
    store.confirm_target_time(18, 0)
    store.add_mission("Shower", 15)
    store.start_time()          # -> today 17:45
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from pydantic import ValidationError

from adventure_time.errors import (
    IndexOutOfRange,
    InvalidMission,
    InvalidTimeValue,
    MissionNotFound,
)
from adventure_time.models import AdventureState, PrepMission
from adventure_time.schedule import (
    anchor_target_time,
    compute_start_time,
    default_picker_time,
    parse_duration,
    start_time_fits,
)

logger = logging.getLogger(__name__)

Listener = Callable[[AdventureState], None]
Clock = Callable[[], datetime]


class AdventureStore:
    """Single-writer holder of the adventure-planning session state.

    Args:
        initial:                  Starting snapshot. Defaults to an empty state.
        clock:                    Returns the current local time. Injected so
                                  tests can pin "today".
        roll_to_next_day_if_past: Move a confirmed time that has already passed
                                  to tomorrow instead of keeping it on today.
    """

    def __init__(
        self,
        initial: AdventureState | None = None,
        *,
        clock: Clock = datetime.now,
        roll_to_next_day_if_past: bool = False,
    ) -> None:
        self._state = initial if initial is not None else AdventureState()
        self._clock = clock
        self._roll_to_next_day_if_past = roll_to_next_day_if_past
        self._listeners: list[Listener] = []

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    @property
    def state(self) -> AdventureState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call `listener(snapshot)` after every change. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def start_time(self) -> datetime | None:
        return compute_start_time(self._state)

    def picker_default(self) -> tuple[int, int]:
        """(hour, minute) the time picker should open on."""
        return default_picker_time(self._clock())

    def _publish(self, new_state: AdventureState) -> None:
        if new_state == self._state:
            return
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)

    # ------------------------------------------------------------------
    # Title and time input
    # ------------------------------------------------------------------

    def set_title(self, new_title: str) -> None:
        self._publish(self._state.model_copy(update={"title": new_title}))
        logger.debug("title set len=%d", len(new_title))

    def set_time_input_visible(self, visible: bool) -> None:
        self._publish(self._state.model_copy(update={"time_input_visible": visible}))
        logger.debug("time input visible=%s", visible)

    def request_time_input(self) -> None:
        self.set_time_input_visible(True)

    def cancel_time_input(self) -> None:
        self.set_time_input_visible(False)

    def confirm_target_time(self, hour: int, minute: int) -> None:
        """Set the adventure for hour:minute today and close the time input.

        Raises InvalidTimeValue for an hour outside 0..23 or a minute outside 0..59.
        Also raised when the current prep total cannot be scheduled before it.
        """
        target = anchor_target_time(
            self._clock(), hour, minute, self._roll_to_next_day_if_past
        )
        if not start_time_fits(target, self._state.total_prep_minutes):
            logger.debug("target time rejected %s: prep too long", target.isoformat())
            raise InvalidTimeValue(
                f"Prep missions total {self._state.total_prep_minutes} minutes, "
                "too long to schedule before this time"
            )
        self._publish(self._state.model_copy(
            update={"target_time": target, "time_input_visible": False}
        ))
        logger.debug("target time confirmed %s", target.isoformat())

    # ------------------------------------------------------------------
    # Prep missions
    # ------------------------------------------------------------------

    def add_mission(self, name: str, duration_minutes: int | str) -> PrepMission:
        """Append a mission to the end of the list and return it.

        Raises InvalidMission for an empty name or a duration that is not a
        non-negative whole number of minutes. Also raised when the
        new total would put the start time before the earliest datetime.
        """
        if not name:
            logger.debug("mission rejected: empty name")
            raise InvalidMission("Mission name cannot be empty")
        duration = parse_duration(duration_minutes)
        try:
            mission = PrepMission(name=name, duration_minutes=duration)
        except ValidationError as e:
            raise InvalidMission(str(e)) from e
        target = self._state.target_time
        total = self._state.total_prep_minutes + duration
        if target is not None and not start_time_fits(target, total):
            logger.debug("mission rejected: total %d minutes overflows", total)
            raise InvalidMission(
                f"Prep missions would total {total} minutes, too long to schedule"
            )

        self._publish(self._state.model_copy(
            update={"prep_missions": (*self._state.prep_missions, mission)}
        ))
        logger.debug(
            "mission added id=%s name=%s duration=%d", mission.id, mission.name, duration
        )
        return mission

    def reorder_mission(self, from_index: int, to_index: int) -> None:
        """Move the mission at `from_index` so it ends up at `to_index`."""
        missions = list(self._state.prep_missions)
        for index in (from_index, to_index):
            if not 0 <= index < len(missions):
                logger.debug("reorder rejected from=%s to=%s len=%d",
                             from_index, to_index, len(missions))
                raise IndexOutOfRange(
                    f"Index {index} out of range for {len(missions)} missions"
                )
        missions.insert(to_index, missions.pop(from_index))
        self._publish(self._state.model_copy(update={"prep_missions": tuple(missions)}))
        logger.debug("mission moved from=%d to=%d", from_index, to_index)

    def remove_mission(self, mission_id: str) -> PrepMission:
        """Remove a mission by id and return it."""
        missions = self._state.prep_missions
        for i, mission in enumerate(missions):
            if mission.id == mission_id:
                break
        else:
            raise MissionNotFound(f"Mission not found: {mission_id}")
        self._publish(self._state.model_copy(
            update={"prep_missions": missions[:i] + missions[i + 1:]}
        ))
        logger.debug("mission removed id=%s", mission_id)
        return mission

    def reset(self) -> None:
        """Start over with an empty adventure."""
        self._publish(AdventureState())
        logger.debug("state reset")
