"""
Pydantic schemas for score submissions.
"""

from pydantic import BaseModel, Field


class ScoreDTO(BaseModel):
    """Request body for rating a movie. The rating user is never part of it."""

    movie_id: int = Field(..., gt=0)
    value: float = Field(..., ge=0.0, le=5.0)
