"""
API Routers package.

Each module contains a FastAPI router for a specific domain.
"""

from .analyze import router as analyze_router

__all__ = [
    "analyze_router",
]
