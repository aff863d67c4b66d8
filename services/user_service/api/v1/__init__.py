"""Version 1 API routes for the user service."""

from fastapi import APIRouter

from .user_routes import router as user_router

router = APIRouter()
router.include_router(user_router)

__all__ = ["router", "user_router"]
