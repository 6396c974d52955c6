"""Routers module - FastAPI route handlers"""

from . import compare, export, preferences

__all__ = ["compare", "export", "preferences"]
