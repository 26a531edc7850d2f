"""
Runtime configuration.

Settings are read from environment variables:

- CAPACITY_LENS_DATA_DIR: directory holding the CSV extracts. When unset the
  API serves a seeded synthetic dataset.
- CAPACITY_LENS_SEED: seed for the synthetic dataset (default 42)
- CAPACITY_LENS_COST_PER_UNIT: variable cost used for impact savings estimates
- LOG_LEVEL: root log level (default INFO)
"""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel

from capacity_lens.services.evaluation import DEFAULT_COST_PER_UNIT


class Settings(BaseModel):
    """Application settings."""

    data_dir: Path | None = None
    seed: int = 42
    cost_per_unit: float = DEFAULT_COST_PER_UNIT
    log_level: str = "INFO"

    model_config = {"frozen": True}


def load_settings() -> Settings:
    """Build settings from the environment."""
    data_dir = os.getenv("CAPACITY_LENS_DATA_DIR")
    return Settings(
        data_dir=Path(data_dir) if data_dir else None,
        seed=int(os.getenv("CAPACITY_LENS_SEED", "42")),
        cost_per_unit=float(os.getenv("CAPACITY_LENS_COST_PER_UNIT", str(DEFAULT_COST_PER_UNIT))),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings."""
    return load_settings()
