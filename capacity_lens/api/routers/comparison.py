"""
Comparison API endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from capacity_lens.domain import PlanVsForecast, PolicyComparison, RouteImpact
from capacity_lens.services import DecisionEngineService
from capacity_lens.api.dependencies import get_decision_engine

router = APIRouter()


@router.get("/{route}", response_model=PolicyComparison)
async def get_comparison(
    route: str,
    engine: Annotated[DecisionEngineService, Depends(get_decision_engine)],
):
    """
    Forecast-only vs strategy-driven performance for a route.

    Forecast-only assumes capacity committed exactly to forecast.
    """
    comparison = engine.compare(route)
    if comparison is None:
        raise HTTPException(status_code=404, detail=f"No execution data for route {route}")
    return comparison


@router.get("/{route}/impact", response_model=RouteImpact)
async def get_impact(
    route: str,
    engine: Annotated[DecisionEngineService, Depends(get_decision_engine)],
):
    """Realized load factor, reliability and estimated savings for a route."""
    impact = engine.impact(route)
    if impact is None:
        raise HTTPException(status_code=404, detail=f"No execution data for route {route}")
    return impact


@router.get("/{route}/commitments", response_model=list[PlanVsForecast])
async def get_commitments(
    route: str,
    engine: Annotated[DecisionEngineService, Depends(get_decision_engine)],
):
    """Committed capacity vs forecast per executed date."""
    commitments = engine.commitments(route)
    if not commitments:
        raise HTTPException(status_code=404, detail=f"No execution data for route {route}")
    return commitments
