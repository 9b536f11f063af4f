"""Top-level API router — aggregates all endpoint routers under /api."""

from fastapi import APIRouter

from client_registry.presentation.api.endpoints.health import router as health_router
from client_registry.presentation.api.endpoints.clients import router as clients_router
from client_registry.presentation.api.endpoints.reference_data import (
    router as reference_data_router,
)

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(clients_router)
router.include_router(reference_data_router)
