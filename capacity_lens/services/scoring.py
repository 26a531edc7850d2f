"""
Factor Scoring.

Reduces route and flight data to the four factor scores of the decision lens:
demand stability, cost exposure, delay risk and real-time flexibility.

Every function is pure. Missing inputs resolve to NEUTRAL_SCORE so that an
unmatched flight or an empty forecast series lands on a medium profile
instead of an extreme strategy.
"""

from typing import Iterable

import numpy as np

from capacity_lens.domain import DemandObservation, FactorScores, FlightProfile

# Score used whenever an input is missing ("no information, assume medium")
NEUTRAL_SCORE = 0.5

# Flexibility is a capability switch, not a graded measure
FLEXIBILITY_WITH_REAL_TIME = 0.9
FLEXIBILITY_WITHOUT_REAL_TIME = 0.3

MIN_STABILITY_OBSERVATIONS = 2


def _demand_values(observations: Iterable[DemandObservation | float | None]) -> np.ndarray:
    values = [
        obs.forecasted_demand if isinstance(obs, DemandObservation) else obs
        for obs in observations
    ]
    # None becomes NaN here; both count as 0
    array = np.asarray(values, dtype=float)
    array[np.isnan(array)] = 0.0
    return array


def score_demand_stability(
    observations: Iterable[DemandObservation | float | None] | None,
) -> float:
    """
    Score how predictable a route's forecast demand is.

    Uses the population coefficient of variation (std / mean, dividing by N):
    stability = clamp(1 - cv, 0, 1). A non-positive mean is treated as
    cv = 1. Order of observations does not matter.

    Args:
        observations: Forecast demand for one route, as DemandObservation
            models or plain numbers. Missing or NaN values count as 0.

    Returns:
        Stability in [0, 1]; NEUTRAL_SCORE with fewer than 2 observations
    """
    if observations is None:
        return NEUTRAL_SCORE

    values = _demand_values(observations)
    if len(values) < MIN_STABILITY_OBSERVATIONS:
        return NEUTRAL_SCORE

    mean = float(values.mean())
    if mean <= 0:
        cv = 1.0
    elif np.all(values == values[0]):
        # Constant series; skip float noise in std
        cv = 0.0
    else:
        cv = float(values.std(ddof=0)) / mean

    return max(0.0, min(1.0, 1.0 - cv))


def score_cost_exposure(flight: FlightProfile | None) -> float:
    """
    Share of full-capacity cost that is fixed.

    fixed_cost / (fixed_cost + variable_cost_per_unit * max_capacity). High
    exposure is an incentive to fill the aircraft whatever the demand signal.
    The result is not clamped; a zero denominator yields 0.0.
    """
    if flight is None:
        return NEUTRAL_SCORE

    total_at_capacity = flight.fixed_cost + flight.variable_cost_per_unit * flight.max_capacity
    if total_at_capacity == 0:
        return 0.0
    return flight.fixed_cost / total_at_capacity


def score_delay_risk(flight: FlightProfile | None) -> float:
    """Recorded delay risk of the flight, passed through unchanged."""
    if flight is None:
        return NEUTRAL_SCORE
    return flight.delay_risk_score


def score_flexibility(flight: FlightProfile | None) -> float:
    """0.9 if capacity can follow real-time updates, otherwise 0.3."""
    if flight is None:
        return NEUTRAL_SCORE
    if flight.real_time_update_flag:
        return FLEXIBILITY_WITH_REAL_TIME
    return FLEXIBILITY_WITHOUT_REAL_TIME


def score_factors(
    observations: Iterable[DemandObservation | float | None] | None,
    flight: FlightProfile | None,
) -> FactorScores:
    """Compute all four factor scores for a route's demand and a flight."""
    return FactorScores(
        demand_stability=score_demand_stability(observations),
        cost_exposure=score_cost_exposure(flight),
        delay_risk=score_delay_risk(flight),
        flexibility=score_flexibility(flight),
    )
