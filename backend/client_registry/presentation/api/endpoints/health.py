"""Health check endpoint: reports the app version and where the client store lives."""

from pathlib import Path

from fastapi import APIRouter

from client_registry.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Returns the application status and whether the clients file exists yet."""
    settings = get_settings()
    clients_file = Path(settings.clients_file)
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "clients_file": str(clients_file),
        "store_initialized": clients_file.exists(),
    }
