"""Liveness endpoint for the dispatch board API."""

from pathlib import Path

from fastapi import APIRouter

from dispatch_board.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Report version, environment and whether image uploads can be stored.

    The upload directory is created at startup; ``"missing"`` means the
    intake endpoint will create it on first use.
    """
    settings = get_settings()
    upload_dir = Path(settings.upload_dir)
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "uploads": "ready" if upload_dir.is_dir() else "missing",
        "max_upload_size_mb": settings.max_upload_size_mb,
    }
