"""
Route planning data generator for synthetic data.

Generates a consistent set of forecasts, flight profiles and execution
outcomes for a handful of routes:
- Forecast demand with route-specific level and volatility
- Flight economics with varied fixed/variable cost split
- Strategy-driven commitments and the load they realized
"""

from datetime import date, timedelta

import numpy as np

from capacity_lens.domain import DemandObservation, ExecutionRecord, FlightProfile
from capacity_lens.data.loader import RouteDataset


class RouteDataGenerator:
    """
    Generate a reproducible synthetic planning dataset.

    Usage:
        dataset = RouteDataGenerator(seed=42).generate_dataset(days=30)
    """

    # route -> (mean demand, coefficient of variation)
    ROUTE_PROFILES: dict[str, tuple[float, float]] = {
        "DEL-FRA": (420.0, 0.08),
        "BOM-LHR": (380.0, 0.25),
        "BLR-DXB": (260.0, 0.45),
        "MAA-SIN": (300.0, 0.15),
    }

    # flight_id -> (max_capacity, fixed_cost, variable_cost_per_unit, delay_risk, real_time)
    FLIGHT_PROFILES: dict[str, tuple[float, float, float, float, bool]] = {
        "FX366": (500.0, 1000.0, 1.0, 0.2, True),
        "FX512": (600.0, 800.0, 3.5, 0.1, False),
        "FX728": (450.0, 9000.0, 2.0, 0.6, False),
        "FX901": (550.0, 1500.0, 4.0, 0.35, True),
    }

    def __init__(self, seed: int | None = None):
        """Initialize generator with optional random seed."""
        self.rng = np.random.default_rng(seed)

    def generate_demand(
        self,
        route: str,
        start_date: date,
        days: int,
    ) -> list[DemandObservation]:
        """Generate a daily forecast series for a route."""
        mean, cv = self.ROUTE_PROFILES.get(route, (300.0, 0.2))
        base = self.rng.normal(mean, mean * cv, size=days).clip(min=0)
        # Forecast tracks base demand with a small model error
        forecast = (base * self.rng.normal(1.0, 0.03, size=days)).clip(min=0)
        confidence = self.rng.uniform(0.6, 0.95, size=days)

        return [
            DemandObservation(
                route=route,
                period=start_date + timedelta(days=i),
                forecasted_demand=round(float(forecast[i]), 1),
                forecast_confidence=round(float(confidence[i]), 3),
            )
            for i in range(days)
        ]

    def generate_flights(self) -> list[FlightProfile]:
        """Flight profiles covering each strategy corner."""
        return [
            FlightProfile(
                flight_id=flight_id,
                max_capacity=capacity,
                fixed_cost=fixed,
                variable_cost_per_unit=variable,
                delay_risk_score=delay_risk,
                real_time_update_flag=real_time,
            )
            for flight_id, (capacity, fixed, variable, delay_risk, real_time) in self.FLIGHT_PROFILES.items()
        ]

    def generate_execution(
        self,
        demand: list[DemandObservation],
        commitment_ratio: float = 0.9,
    ) -> list[ExecutionRecord]:
        """
        Generate realized outcomes for a forecast series.

        Commitments sit at commitment_ratio of forecast; actual load scatters
        around the forecast.
        """
        records = []
        for obs in demand:
            forecast = obs.forecasted_demand or 0.0
            committed = forecast * commitment_ratio
            actual = max(0.0, float(self.rng.normal(forecast * 0.85, forecast * 0.12 + 1)))
            load_factor = actual / committed * 100 if committed > 0 else 0.0

            records.append(
                ExecutionRecord(
                    date=obs.period,
                    route=obs.route or "",
                    forecasted_demand=forecast,
                    committed_capacity=round(committed, 1),
                    actual_net_weight=round(actual, 1),
                    void_capacity=round(max(0.0, committed - actual), 1),
                    load_factor=round(load_factor, 1),
                )
            )
        return records

    def generate_dataset(
        self,
        start_date: date = date(2026, 1, 1),
        days: int = 30,
        routes: list[str] | None = None,
    ) -> RouteDataset:
        """Generate forecasts, flights and execution for all routes."""
        routes = routes or list(self.ROUTE_PROFILES)

        demand: list[DemandObservation] = []
        execution: list[ExecutionRecord] = []
        for route in routes:
            series = self.generate_demand(route, start_date, days)
            demand.extend(series)
            execution.extend(self.generate_execution(series))

        return RouteDataset(demand=demand, flights=self.generate_flights(), execution=execution)
