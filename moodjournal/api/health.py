"""Health check endpoint."""

from fastapi import APIRouter

from moodjournal.core.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict[str, str]:
    """Liveness probe; does not touch the database."""
    return {"status": "ok", "service": settings.app_name}
