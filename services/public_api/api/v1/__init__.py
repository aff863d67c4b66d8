"""Version 1 API routes for the public API layer."""

from fastapi import APIRouter

from .public_routes import router as public_router

router = APIRouter()
router.include_router(public_router)

__all__ = ["router", "public_router"]
