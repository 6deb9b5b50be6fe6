from datetime import datetime

import pytest

from adventure_time.config import merge_config
from adventure_time.store import AdventureStore
from backend import session

# Fixed "now" for every test: a Saturday afternoon
NOW = datetime(2024, 6, 1, 14, 30, 12, 500)


@pytest.fixture(autouse=True)
def clean_session():
    """Start every test with an empty adventure and a pinned clock."""
    session.init_session(merge_config({}), AdventureStore(clock=lambda: NOW))
    yield


@pytest.fixture
def store() -> AdventureStore:
    return AdventureStore(clock=lambda: NOW)
