"""
Top‑level router for version 1 of the API.

This router aggregates the endpoint routers under a unified prefix.
When new endpoints are added, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import info, shoes

router = APIRouter()

router.include_router(shoes.router, prefix="/shoes", tags=["shoes"])
router.include_router(info.router, prefix="/info", tags=["info"])
