"""
FastAPI application for the capacity decision engine.

Provides REST endpoints for:
- Strategy decisions per route and flight
- Forecast-only vs strategy-driven comparison
- Dataset catalog
"""

from .main import app, create_app

__all__ = ["app", "create_app"]
