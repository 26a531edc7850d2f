"""Route-level capacity-commitment decision engine."""

__version__ = "1.0.0"
