"""
Strategy Classification.

Maps factor scores to a capacity-commitment strategy with a fixed decision
table. Rules overlap; they are checked in order and the first match wins.
"""

from capacity_lens.domain import FactorScores, Strategy

# Rule 1: strong, cheap-to-fill, punctual demand
MAXIMIZE_MIN_STABILITY = 0.7
MAXIMIZE_MAX_COST_EXPOSURE = 0.5
MAXIMIZE_MAX_DELAY_RISK = 0.3

# Rule 2: capacity can be adjusted on the day
BUFFER_MIN_FLEXIBILITY = 0.7
BUFFER_MAX_DELAY_RISK = 0.4

# Rule 3: risk dominates
CONSERVATIVE_MIN_DELAY_RISK = 0.5
CONSERVATIVE_MIN_COST_EXPOSURE = 0.7


def classify_strategy(scores: FactorScores) -> Strategy:
    """
    Choose a strategy from the four factor scores.

    All comparisons are strict: a score sitting exactly on a threshold does
    not satisfy that rule.
    """
    if (
        scores.demand_stability > MAXIMIZE_MIN_STABILITY
        and scores.cost_exposure < MAXIMIZE_MAX_COST_EXPOSURE
        and scores.delay_risk < MAXIMIZE_MAX_DELAY_RISK
    ):
        return Strategy.MAXIMIZE_UTILIZATION

    if scores.flexibility > BUFFER_MIN_FLEXIBILITY and scores.delay_risk < BUFFER_MAX_DELAY_RISK:
        return Strategy.DYNAMIC_BUFFER

    if (
        scores.delay_risk > CONSERVATIVE_MIN_DELAY_RISK
        or scores.cost_exposure > CONSERVATIVE_MIN_COST_EXPOSURE
    ):
        return Strategy.CONSERVATIVE_LOADING

    return Strategy.BALANCED_ALLOCATION
