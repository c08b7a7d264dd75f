"""
FastAPI Main Application - Intl Format Distance
Entry point for the HTTP service that formats relative distances between instants.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from intl_distance.api import distance
from intl_distance.config import settings
from intl_distance.utils.app_logger import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifecycle manager for the FastAPI application.
    Handles startup and shutdown events.
    """
    # Validate configuration
    try:
        settings.validate_config()
    except ValueError as e:
        logger.config_validation_failed(str(e))
        raise

    logger.app_started()

    yield

    logger.info("Shutting down application")


# Initialize FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Locale-aware relative distance between two instants",
    lifespan=lifespan,
    debug=settings.DEBUG,
)

# Include API routers
app.include_router(distance.router, tags=["distance"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


@app.get("/config")
async def config_info():
    """Configuration info endpoint (for debugging)"""
    return settings.get_deployment_info()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "intl_distance.main:app",
        host="0.0.0.0",
        port=8080,
        reload=settings.DEBUG,
    )
