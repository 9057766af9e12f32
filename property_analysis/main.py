"""
Main FastAPI application entry point.
"""

import logging

from fastapi import FastAPI

from property_analysis import __version__
from property_analysis.config import get_settings
from property_analysis.api import router as api_router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format=settings.log_format,
)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Rental property investment analysis",
    version=__version__,
    debug=settings.debug,
)

# Include API routes
app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "version": __version__}


def run():
    """Serve the app with uvicorn using configured host and port."""
    import uvicorn

    uvicorn.run(
        "property_analysis.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
