"""
API routes for the financial calculation engine.
"""

from fastapi import APIRouter

from app.api import calculations, projects

router = APIRouter()

# Include sub-routers
router.include_router(calculations.router, prefix="/calculate", tags=["calculations"])
router.include_router(projects.router, prefix="/calculate", tags=["projects"])
