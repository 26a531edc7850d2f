"""
Flight domain models.

Reference economics for a flight: capacity, cost structure, delay exposure
and whether capacity can be adjusted from real-time signals.
"""

from typing import Any

from pydantic import BaseModel, Field, computed_field, field_validator


class FlightProfile(BaseModel):
    """
    Capacity and cost profile of a single flight.

    Looked up by flight_id. Immutable reference data.
    """

    flight_id: str
    max_capacity: float = Field(default=0.0, ge=0)
    fixed_cost: float = Field(default=0.0, ge=0)
    variable_cost_per_unit: float = Field(default=0.0, ge=0)
    delay_risk_score: float = 0.0  # 0-1, supplied upstream
    real_time_update_flag: bool = False

    model_config = {"frozen": True}

    @field_validator("real_time_update_flag", mode="before")
    @classmethod
    def coerce_flag(cls, value: Any) -> bool:
        """Accept 1/0 and string flags from tabular sources."""
        if isinstance(value, str):
            return value.strip().lower() in {"1", "1.0", "true", "yes", "y"}
        if value is None:
            return False
        return bool(value)

    @computed_field
    @property
    def variable_cost_at_capacity(self) -> float:
        """Variable cost if the flight flies full."""
        return self.variable_cost_per_unit * self.max_capacity

    @computed_field
    @property
    def total_cost_at_capacity(self) -> float:
        """Fixed plus variable cost at full capacity."""
        return self.fixed_cost + self.variable_cost_at_capacity
