"""FastAPI API endpoints under /api.

Endpoint groups: health/settings and the adventure session. The session has
a single adventure, so its resources live directly under /api/adventure/
(title, time-input, time, missions).
"""

from fastapi import APIRouter

from .adventure import router as adventure_router
from .settings import router as settings_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(adventure_router)
