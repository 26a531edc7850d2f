"""
Routes API endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from capacity_lens.data import RouteDataset
from capacity_lens.api.dependencies import get_dataset

router = APIRouter()


class RouteCatalog(BaseModel):
    """Routes, dates and flights available for selection."""

    routes: list[str]
    dates: list[str]
    flights: list[str]
    total_routes: int


@router.get("/", response_model=RouteCatalog)
async def list_routes(dataset: Annotated[RouteDataset, Depends(get_dataset)]):
    """List the routes, forecast dates and flights in the loaded dataset."""
    routes = dataset.routes()
    return RouteCatalog(
        routes=routes,
        dates=dataset.dates(),
        flights=dataset.flight_ids(),
        total_routes=len(routes),
    )
