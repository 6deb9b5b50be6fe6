"""Health check and settings endpoints."""

from fastapi import APIRouter

from backend import session

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.get("/settings")
async def get_settings():
    """Get the active settings (day rollover policy, time format)."""
    return session.config()
