"""
Decisions API endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from capacity_lens.domain import FactorScores
from capacity_lens.services import DecisionEngineService, classify_strategy
from capacity_lens.api.dependencies import get_decision_engine

router = APIRouter()


class DecisionResponse(BaseModel):
    """Strategy decision response."""

    route: str
    flight_id: str | None
    flight_found: bool
    demand_stability: float
    cost_exposure: float
    delay_risk: float
    flexibility: float
    factor_levels: dict[str, str]
    avg_forecast_confidence: float | None
    strategy: str


class ClassificationResponse(BaseModel):
    """Strategy for a given set of factor scores."""

    strategy: str


@router.post("/classify", response_model=ClassificationResponse)
async def classify(scores: FactorScores):
    """Classify an explicit set of factor scores."""
    return ClassificationResponse(strategy=classify_strategy(scores).value)


@router.get("/", response_model=list[DecisionResponse])
async def list_decisions(
    engine: Annotated[DecisionEngineService, Depends(get_decision_engine)],
    flight_id: str | None = Query(default=None),
):
    """Strategy for every route, using one flight's economics."""
    return [_to_response(engine, d) for d in engine.evaluate_all(flight_id)]


@router.get("/{route}", response_model=DecisionResponse)
async def get_decision(
    route: str,
    engine: Annotated[DecisionEngineService, Depends(get_decision_engine)],
    flight_id: str | None = Query(default=None),
):
    """
    Recommend a capacity strategy for a route.

    The route's forecast is scored for stability; the flight supplies cost,
    delay and flexibility. An unknown flight scores neutral.
    """
    if not engine.dataset.has_route(route):
        raise HTTPException(status_code=404, detail=f"Route {route} not found")

    return _to_response(engine, engine.evaluate(route, flight_id))


def _to_response(engine: DecisionEngineService, decision) -> DecisionResponse:
    """Convert decision to response model."""
    scores = decision.scores
    return DecisionResponse(
        route=decision.route,
        flight_id=decision.flight_id,
        flight_found=engine.dataset.flight(decision.flight_id) is not None,
        demand_stability=scores.demand_stability,
        cost_exposure=scores.cost_exposure,
        delay_risk=scores.delay_risk,
        flexibility=scores.flexibility,
        factor_levels={name: level.value for name, level in decision.factor_levels.items()},
        avg_forecast_confidence=engine.forecast_confidence(decision.route),
        strategy=decision.strategy.value,
    )
