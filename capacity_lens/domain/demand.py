"""
Demand domain models.

Forecast demand as handed to the decision engine. Forecasts are inputs,
never modified here.
"""

from datetime import date

from pydantic import BaseModel


class DemandObservation(BaseModel):
    """One forecast demand value for a route and period."""

    route: str | None = None
    period: date
    forecasted_demand: float | None = None

    # Model confidence reported with the forecast
    forecast_confidence: float | None = None  # 0-1

    model_config = {"frozen": True}
