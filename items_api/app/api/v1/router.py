"""
Top‑level router for version 1 of the API.
"""

from fastapi import APIRouter

from .endpoints import info, items

router = APIRouter()

router.include_router(items.router, prefix="/items", tags=["items"])
router.include_router(info.router, prefix="/info", tags=["info"])
