"""
Decision domain models.

The four-factor scores and the capacity-commitment strategy derived from them.
"""

from enum import Enum

from pydantic import BaseModel, computed_field


class Strategy(str, Enum):
    """Capacity-commitment strategy."""

    MAXIMIZE_UTILIZATION = "Maximize Utilization"  # Commit close to forecast
    DYNAMIC_BUFFER = "Dynamic Buffer"  # Hold a buffer, adjust on real-time signals
    CONSERVATIVE_LOADING = "Conservative Loading"  # Under-commit to protect service
    BALANCED_ALLOCATION = "Balanced Allocation"  # No dominant signal


class FactorLevel(str, Enum):
    """Display band for a factor score."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @classmethod
    def of(cls, score: float) -> "FactorLevel":
        if score >= 0.7:
            return cls.HIGH
        if score >= 0.4:
            return cls.MEDIUM
        return cls.LOW


class FactorScores(BaseModel):
    """
    Scores for the 4-factor decision lens.

    Each is nominally in [0, 1]. Values are not range-checked: malformed cost
    or delay inputs upstream can legitimately produce scores outside it.
    """

    demand_stability: float
    cost_exposure: float
    delay_risk: float
    flexibility: float

    model_config = {"frozen": True}

    def levels(self) -> dict[str, FactorLevel]:
        """Display band per factor."""
        return {
            "demand_stability": FactorLevel.of(self.demand_stability),
            "cost_exposure": FactorLevel.of(self.cost_exposure),
            "delay_risk": FactorLevel.of(self.delay_risk),
            "flexibility": FactorLevel.of(self.flexibility),
        }


class StrategyDecision(BaseModel):
    """Strategy chosen for a route/flight together with the scores behind it."""

    route: str | None = None
    flight_id: str | None = None
    scores: FactorScores
    strategy: Strategy

    model_config = {"frozen": True}

    @computed_field
    @property
    def factor_levels(self) -> dict[str, FactorLevel]:
        """High/Medium/Low band for each factor."""
        return self.scores.levels()
