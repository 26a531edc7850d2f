"""API routers."""

from . import routes, decisions, comparison

__all__ = ["routes", "decisions", "comparison"]
