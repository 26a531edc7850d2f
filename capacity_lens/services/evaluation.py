"""
Policy Evaluation.

Retrospective comparison of two commitment policies over a route's realized
outcomes:

- Forecast-only: commitment is assumed to equal the forecast exactly
- Strategy-driven: the commitment that was actually made

Also summarizes realized impact and the gap between a plan and its forecast.
"""

from dataclasses import dataclass
from datetime import date
from typing import Sequence

from capacity_lens.domain import (
    ExecutionRecord,
    PolicyMetrics,
    PolicyComparison,
    RouteImpact,
    PlanVsForecast,
)

# Load factor (%) above which a departure counts as reliable service
RELIABILITY_LOAD_FACTOR = 25.0

DEFAULT_COST_PER_UNIT = 3.5
DEFAULT_EFFICIENCY_GAIN = 0.1


@dataclass
class _PolicyTally:
    """Running totals for one policy."""

    delays: int = 0
    utilization: float = 0.0
    reliable: int = 0
    void_capacity: float = 0.0

    def add(self, load_factor: float, void_capacity: float, delayed: bool) -> None:
        self.utilization += load_factor
        self.void_capacity += void_capacity
        if delayed:
            self.delays += 1
        if load_factor > RELIABILITY_LOAD_FACTOR:
            self.reliable += 1

    def metrics(self, count: int) -> PolicyMetrics:
        return PolicyMetrics(
            delay_rate=self.delays / count * 100,
            avg_utilization=self.utilization / count,
            reliability=self.reliable / count * 100,
            avg_void_capacity=self.void_capacity / count,
            record_count=count,
        )


def _forecast_only_load_factor(record: ExecutionRecord) -> float:
    if record.forecasted_demand <= 0:
        return 0.0
    return record.actual_net_weight / record.forecasted_demand * 100


def evaluate_policies(
    records: Sequence[ExecutionRecord],
    route: str | None = None,
) -> PolicyComparison | None:
    """
    Compare forecast-only and strategy-driven commitment over a route.

    Args:
        records: Execution records for one route
        route: Route label for the result; taken from the records if omitted

    Returns:
        Parallel metrics for both policies, or None when there are no records
    """
    if not records:
        return None

    forecast_only = _PolicyTally()
    strategy_driven = _PolicyTally()

    for record in records:
        forecast = record.forecasted_demand
        actual = record.actual_net_weight

        forecast_only.add(
            load_factor=_forecast_only_load_factor(record),
            void_capacity=max(0.0, forecast - actual),
            delayed=actual > forecast,
        )
        strategy_driven.add(
            load_factor=record.load_factor,
            void_capacity=record.void_capacity,
            delayed=actual > record.committed_capacity,
        )

    count = len(records)
    return PolicyComparison(
        route=route if route is not None else records[0].route,
        forecast_only=forecast_only.metrics(count),
        strategy_driven=strategy_driven.metrics(count),
    )


def summarize_impact(
    records: Sequence[ExecutionRecord],
    cost_per_unit: float = DEFAULT_COST_PER_UNIT,
    efficiency_gain: float = DEFAULT_EFFICIENCY_GAIN,
    route: str | None = None,
) -> RouteImpact | None:
    """
    Realized impact of the strategy-driven commitments on a route.

    Savings are estimated as avg void capacity * cost per unit * days *
    efficiency gain. Returns None when there are no records.
    """
    if not records:
        return None

    days = len(records)
    avg_load_factor = sum(r.load_factor for r in records) / days
    reliable = sum(1 for r in records if r.load_factor > RELIABILITY_LOAD_FACTOR)
    avg_void = sum(r.void_capacity for r in records) / days

    return RouteImpact(
        route=route if route is not None else records[0].route,
        days=days,
        avg_load_factor=avg_load_factor,
        reliability=reliable / days * 100,
        avg_void_capacity=avg_void,
        estimated_cost_savings=avg_void * cost_per_unit * days * efficiency_gain,
    )


def compare_plan(
    forecasted_demand: float,
    committed_capacity: float,
    period: date | None = None,
) -> PlanVsForecast:
    """Gap between committed capacity and forecast, in percent of forecast."""
    gap = None
    if forecasted_demand > 0:
        gap = (1 - committed_capacity / forecasted_demand) * 100

    return PlanVsForecast(
        period=period,
        forecasted_demand=forecasted_demand,
        committed_capacity=committed_capacity,
        commitment_gap_pct=gap,
    )
