"""Session holder for the single adventure being planned.

The screen has one store for the lifetime of the process. create_app() calls
init_session() once; routes reach the store through store().
"""

from typing import Any

from adventure_time.config import get_config
from adventure_time.store import AdventureStore

_store: AdventureStore | None = None
_config: dict[str, Any] | None = None


def init_session(config: dict[str, Any] | None = None, store: AdventureStore | None = None) -> None:
    global _store, _config
    _config = config if config is not None else get_config()
    _store = store or AdventureStore(
        roll_to_next_day_if_past=_config["roll_to_next_day_if_past"],
    )


def store() -> AdventureStore:
    assert _store is not None, "Call init_session() before using the session"
    return _store


def config() -> dict[str, Any]:
    assert _config is not None, "Call init_session() before using the session"
    return _config
