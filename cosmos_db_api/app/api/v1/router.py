"""
Top-level router for version 1 of the API.

Aggregates the item, course and admin routers under a unified prefix.
When new endpoints are added, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import admin, courses, items

router = APIRouter()

router.include_router(items.router, prefix="/items", tags=["items"])
router.include_router(courses.router, prefix="/courses", tags=["courses"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
