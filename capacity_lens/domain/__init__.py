"""
Domain models for the capacity decision engine.

Core business entities: forecast demand, flight economics, factor scores,
strategies and execution outcomes.
All models use Pydantic for validation and serialization.
"""

from .demand import DemandObservation
from .flight import FlightProfile
from .decision import FactorScores, FactorLevel, Strategy, StrategyDecision
from .execution import (
    ExecutionRecord,
    PolicyMetrics,
    PolicyComparison,
    RouteImpact,
    PlanVsForecast,
)

__all__ = [
    # Demand
    "DemandObservation",
    # Flight
    "FlightProfile",
    # Decision
    "FactorScores",
    "FactorLevel",
    "Strategy",
    "StrategyDecision",
    # Execution
    "ExecutionRecord",
    "PolicyMetrics",
    "PolicyComparison",
    "RouteImpact",
    "PlanVsForecast",
]
