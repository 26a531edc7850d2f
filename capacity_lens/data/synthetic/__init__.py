"""
Synthetic data generation for the capacity decision engine.

Generates route forecasts, flight economics and execution outcomes.

Use for:
- Demos and API development without planning extracts
- System testing
"""

from .route_generator import RouteDataGenerator

__all__ = ["RouteDataGenerator"]
