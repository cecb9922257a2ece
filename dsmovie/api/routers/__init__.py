"""
API route handlers.
"""

from dsmovie.api.routers import movies, scores, system

__all__ = ["movies", "scores", "system"]
