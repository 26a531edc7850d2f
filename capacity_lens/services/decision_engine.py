"""
Decision Engine Service.

Runs the scoring -> classification pipeline over a planning dataset and
exposes the policy comparison views for a route.
"""

import logging

from capacity_lens.data import RouteDataset
from capacity_lens.domain import PlanVsForecast, PolicyComparison, RouteImpact, StrategyDecision
from capacity_lens.services.classification import classify_strategy
from capacity_lens.services.evaluation import (
    DEFAULT_COST_PER_UNIT,
    compare_plan,
    evaluate_policies,
    summarize_impact,
)
from capacity_lens.services.scoring import score_factors

logger = logging.getLogger(__name__)


class DecisionEngineService:
    """
    Service for recommending capacity-commitment strategies.

    The forecast is never changed; the engine decides how far to trust it.
    Unknown routes or flights are treated as missing data and scored with
    neutral defaults.

    Usage:
        service = DecisionEngineService(dataset)
        decision = service.evaluate("DEL-FRA", "FX366")
        comparison = service.compare("DEL-FRA")
    """

    def __init__(self, dataset: RouteDataset, cost_per_unit: float = DEFAULT_COST_PER_UNIT):
        self.dataset = dataset
        self.cost_per_unit = cost_per_unit

    def evaluate(self, route: str, flight_id: str | None = None) -> StrategyDecision:
        """
        Score a route/flight pair and classify its strategy.

        Args:
            route: Route key, e.g. "DEL-FRA"
            flight_id: Flight whose economics apply; None scores neutral

        Returns:
            Strategy decision with factor scores
        """
        scores = score_factors(self.dataset.demand_for(route), self.dataset.flight(flight_id))
        strategy = classify_strategy(scores)

        logger.debug(
            "Classified %s/%s as %s",
            route,
            flight_id,
            strategy.value,
            extra={"route": route, "flight_id": flight_id, "strategy": strategy.value},
        )
        return StrategyDecision(
            route=route,
            flight_id=flight_id,
            scores=scores,
            strategy=strategy,
        )

    def evaluate_all(self, flight_id: str | None = None) -> list[StrategyDecision]:
        """Evaluate every route in the dataset against one flight."""
        return [self.evaluate(route, flight_id) for route in self.dataset.routes()]

    def compare(self, route: str) -> PolicyComparison | None:
        """Forecast-only vs strategy-driven metrics for a route."""
        return evaluate_policies(self.dataset.execution_for(route), route=route)

    def impact(self, route: str) -> RouteImpact | None:
        """Realized impact summary for a route."""
        return summarize_impact(
            self.dataset.execution_for(route),
            cost_per_unit=self.cost_per_unit,
            route=route,
        )

    def commitments(self, route: str) -> list[PlanVsForecast]:
        """Committed capacity against forecast for each executed date."""
        return [
            compare_plan(r.forecasted_demand, r.committed_capacity, period=r.date)
            for r in self.dataset.execution_for(route)
        ]

    def forecast_confidence(self, route: str) -> float | None:
        """Mean reported forecast confidence for a route, None if none reported."""
        values = [
            obs.forecast_confidence
            for obs in self.dataset.demand_for(route)
            if obs.forecast_confidence is not None
        ]
        if not values:
            return None
        return sum(values) / len(values)
