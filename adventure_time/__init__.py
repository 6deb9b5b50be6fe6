"""Adventure planning core: snapshot model, store and start-time schedule."""

from .errors import (  # noqa: F401
    AdventureError,
    IndexOutOfRange,
    InvalidMission,
    InvalidTimeValue,
    MissionNotFound,
)
from .models import AdventureState, PrepMission  # noqa: F401
from .schedule import compute_start_time  # noqa: F401
from .store import AdventureStore  # noqa: F401
