"""Version 1 API routes for the listing service."""

from fastapi import APIRouter

from .listing_routes import router as listing_router

router = APIRouter()
router.include_router(listing_router)

__all__ = ["router", "listing_router"]
