"""Pytest fixtures for capacity decision engine tests."""

import pytest
from datetime import date, timedelta

from capacity_lens.domain import DemandObservation, ExecutionRecord, FlightProfile
from capacity_lens.data import RouteDataset
from capacity_lens.services import DecisionEngineService


def make_series(route: str, values: list[float], start: date = date(2026, 1, 1)) -> list[DemandObservation]:
    """Daily forecast series starting at start."""
    return [
        DemandObservation(route=route, period=start + timedelta(days=i), forecasted_demand=v)
        for i, v in enumerate(values)
    ]


@pytest.fixture
def sample_flight() -> FlightProfile:
    """Flexible, moderately fixed-cost flight."""
    return FlightProfile(
        flight_id="FX366",
        max_capacity=500,
        fixed_cost=1000,
        variable_cost_per_unit=1,
        delay_risk_score=0.2,
        real_time_update_flag=True,
    )


@pytest.fixture
def cheap_flight() -> FlightProfile:
    """Low fixed cost, punctual, no real-time updates."""
    return FlightProfile(
        flight_id="FX100",
        max_capacity=500,
        fixed_cost=100,
        variable_cost_per_unit=1,
        delay_risk_score=0.1,
        real_time_update_flag=False,
    )


@pytest.fixture
def risky_flight() -> FlightProfile:
    """High fixed cost and high delay risk."""
    return FlightProfile(
        flight_id="FX728",
        max_capacity=450,
        fixed_cost=9000,
        variable_cost_per_unit=2,
        delay_risk_score=0.6,
        real_time_update_flag=False,
    )


@pytest.fixture
def execution_records() -> list[ExecutionRecord]:
    """Two executed days on DEL-FRA: one over commitment, one light."""
    return [
        ExecutionRecord(
            date=date(2026, 1, 1),
            route="DEL-FRA",
            forecasted_demand=100,
            committed_capacity=90,
            actual_net_weight=95,
            void_capacity=0,
            load_factor=105.6,
        ),
        ExecutionRecord(
            date=date(2026, 1, 2),
            route="DEL-FRA",
            forecasted_demand=100,
            committed_capacity=90,
            actual_net_weight=20,
            void_capacity=70,
            load_factor=22.2,
        ),
    ]


@pytest.fixture
def dataset(sample_flight, cheap_flight, risky_flight, execution_records) -> RouteDataset:
    """Small hand-built dataset with two routes and three flights."""
    return RouteDataset(
        demand=make_series("DEL-FRA", [10, 10, 10, 10]) + make_series("BOM-LHR", [100, 300]),
        flights=[sample_flight, cheap_flight, risky_flight],
        execution=execution_records,
    )


@pytest.fixture
def decision_engine(dataset) -> DecisionEngineService:
    """Create a decision engine over the hand-built dataset."""
    return DecisionEngineService(dataset)
