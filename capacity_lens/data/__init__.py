"""
Data collaborators for the capacity decision engine.

Loads planning extracts into domain models and generates synthetic datasets.
"""

from .loader import RouteDataset, DatasetError, load_dataset

__all__ = ["RouteDataset", "DatasetError", "load_dataset"]
