"""
Execution domain models.

Realized outcomes per route/date, and the retrospective summaries computed
from them for comparing commitment policies.
"""

from datetime import date

from pydantic import BaseModel, computed_field


class ExecutionRecord(BaseModel):
    """
    Planned vs realized outcome for one route on one date.

    committed_capacity is what the strategy actually committed; load_factor
    and void_capacity are the recorded results of that commitment.
    """

    date: date
    route: str
    forecasted_demand: float = 0.0
    committed_capacity: float = 0.0
    actual_net_weight: float = 0.0
    void_capacity: float = 0.0
    load_factor: float = 0.0  # Percent

    model_config = {"frozen": True}


class PolicyMetrics(BaseModel):
    """Aggregate performance of one commitment policy over a route."""

    delay_rate: float  # Percent of records where demand exceeded commitment
    avg_utilization: float  # Mean load factor, percent
    reliability: float  # Percent of records with load factor above 25%
    avg_void_capacity: float
    record_count: int

    model_config = {"frozen": True}


class PolicyComparison(BaseModel):
    """
    Forecast-only baseline vs strategy-driven commitment for a route.

    Reporting view only; no decision is taken from it.
    """

    route: str | None = None
    forecast_only: PolicyMetrics
    strategy_driven: PolicyMetrics

    model_config = {"frozen": True}

    @computed_field
    @property
    def reliability_improvement(self) -> float | None:
        """Relative reliability change in percent, None if baseline is zero."""
        if self.forecast_only.reliability == 0:
            return None
        return (
            (self.strategy_driven.reliability - self.forecast_only.reliability)
            / self.forecast_only.reliability
            * 100
        )

    @computed_field
    @property
    def utilization_difference(self) -> float:
        """Strategy minus baseline utilization, percentage points."""
        return self.strategy_driven.avg_utilization - self.forecast_only.avg_utilization

    @computed_field
    @property
    def delay_rate_reduction(self) -> float:
        """Baseline minus strategy delay rate, percentage points."""
        return self.forecast_only.delay_rate - self.strategy_driven.delay_rate

    @computed_field
    @property
    def void_capacity_reduction(self) -> float:
        """Baseline minus strategy average void capacity."""
        return self.forecast_only.avg_void_capacity - self.strategy_driven.avg_void_capacity


class RouteImpact(BaseModel):
    """Realized impact of strategy-driven commitment on a route."""

    route: str | None = None
    days: int
    avg_load_factor: float
    reliability: float
    avg_void_capacity: float
    estimated_cost_savings: float

    model_config = {"frozen": True}


class PlanVsForecast(BaseModel):
    """How far a committed capacity sits from the unchanged forecast."""

    period: date | None = None
    forecasted_demand: float
    committed_capacity: float
    commitment_gap_pct: float | None  # Positive when under-committing

    model_config = {"frozen": True}

    @computed_field
    @property
    def is_under_commitment(self) -> bool:
        """True when less capacity was committed than forecast."""
        return self.committed_capacity < self.forecasted_demand
