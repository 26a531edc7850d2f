"""
API dependencies.

Provides dependency injection for FastAPI routes.
"""

import logging

from capacity_lens.config import get_settings
from capacity_lens.data import RouteDataset, load_dataset
from capacity_lens.data.synthetic import RouteDataGenerator
from capacity_lens.services import DecisionEngineService

logger = logging.getLogger(__name__)


class AppState:
    """Application state container."""

    _instance: "AppState | None" = None

    def __init__(self, dataset: RouteDataset | None = None):
        settings = get_settings()
        if dataset is None:
            if settings.data_dir is not None:
                dataset = load_dataset(settings.data_dir)
            else:
                logger.info("No data directory configured, using synthetic dataset (seed=%d)", settings.seed)
                dataset = RouteDataGenerator(seed=settings.seed).generate_dataset()

        self.dataset = dataset
        self.decision_engine = DecisionEngineService(dataset, cost_per_unit=settings.cost_per_unit)

    @classmethod
    def get_instance(cls) -> "AppState":
        """Get or create singleton instance."""
        if cls._instance is None:
            cls._instance = AppState()
        return cls._instance

    @classmethod
    def reset(cls, dataset: RouteDataset | None = None) -> None:
        """Reset singleton, optionally to a given dataset (for testing)."""
        cls._instance = AppState(dataset) if dataset is not None else None


def get_dataset() -> RouteDataset:
    """Dependency for the planning dataset."""
    return AppState.get_instance().dataset


def get_decision_engine() -> DecisionEngineService:
    """Dependency for the decision engine."""
    return AppState.get_instance().decision_engine
