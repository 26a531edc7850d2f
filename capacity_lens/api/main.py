"""
FastAPI main application.
"""

from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from capacity_lens import __version__
from capacity_lens.config import get_settings
from capacity_lens.logging_setup import setup_logging

from .routers import routes, decisions, comparison


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    setup_logging(get_settings().log_level)

    application = FastAPI(
        title="Capacity Lens API",
        description="""
        Route-level capacity-commitment decision engine.

        Forecasts are taken as given; the engine decides how much capacity to
        commit against them.

        ## Features

        - **Decisions**: 4-factor scores and recommended strategy per route/flight
        - **Comparison**: Forecast-only vs strategy-driven performance
        - **Routes**: Routes, dates and flights in the loaded dataset
        """,
        version=__version__,
    )

    # CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    application.include_router(
        routes.router,
        prefix="/api/v1/routes",
        tags=["Routes"],
    )
    application.include_router(
        decisions.router,
        prefix="/api/v1/decisions",
        tags=["Decisions"],
    )
    application.include_router(
        comparison.router,
        prefix="/api/v1/comparison",
        tags=["Comparison"],
    )

    @application.get("/", tags=["Health"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "Capacity Lens API",
            "version": __version__,
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    @application.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "services": {
                "decisions": "available",
                "comparison": "available",
            },
        }

    return application


# Create default app instance
app = create_app()
