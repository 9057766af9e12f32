"""
API routes for the property analyzer.
"""

from fastapi import APIRouter

from property_analysis.api import calculations

router = APIRouter()

router.include_router(calculations.router, prefix="/calculate", tags=["calculations"])
