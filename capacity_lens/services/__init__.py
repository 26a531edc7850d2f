"""
Core services for the capacity decision engine.

Business logic layer containing:
- Scoring: the four factor scores of the decision lens
- Classification: factor scores -> capacity-commitment strategy
- Evaluation: forecast-only vs strategy-driven policy comparison
- Decision engine: the pipeline over a planning dataset
"""

from .scoring import (
    NEUTRAL_SCORE,
    score_demand_stability,
    score_cost_exposure,
    score_delay_risk,
    score_flexibility,
    score_factors,
)
from .classification import classify_strategy
from .evaluation import evaluate_policies, summarize_impact, compare_plan
from .decision_engine import DecisionEngineService

__all__ = [
    "NEUTRAL_SCORE",
    "score_demand_stability",
    "score_cost_exposure",
    "score_delay_risk",
    "score_flexibility",
    "score_factors",
    "classify_strategy",
    "evaluate_policies",
    "summarize_impact",
    "compare_plan",
    "DecisionEngineService",
]
