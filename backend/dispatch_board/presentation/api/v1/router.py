"""V1 API router, aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from dispatch_board.presentation.api.v1.endpoints.health import router as health_router
from dispatch_board.presentation.api.v1.endpoints.uploads import router as uploads_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(uploads_router)
