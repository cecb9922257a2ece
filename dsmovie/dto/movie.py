"""
Pydantic schemas for movies.
"""

from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, Field, field_validator

from dsmovie.database.models import Movie
from dsmovie.database.pagination import Page

SCORE_STEP = Decimal("0.1")


def round_score(score: float) -> float:
    """Round to one decimal, halves away from zero (4.25 gives 4.3)."""
    return float(Decimal(str(score)).quantize(SCORE_STEP, rounding=ROUND_HALF_UP))


class MovieDTO(BaseModel):
    """Movie as exchanged with callers."""

    id: int | None = None
    title: str = Field(..., min_length=5, max_length=80)
    score: float = Field(0.0, ge=0)
    count: int = Field(0, ge=0)
    image: str | None = Field(None, max_length=255)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Title must not be blank")
        return value

    @classmethod
    def from_entity(cls, movie: Movie) -> "MovieDTO":
        """
        Map a stored movie to its DTO.

        Stored data is not re-validated. The aggregate keeps full precision
        in the entity and is rounded here, for display.
        """
        return cls.model_construct(
            id=movie.id,
            title=movie.title,
            score=round_score(movie.score or 0.0),
            count=movie.count or 0,
            image=movie.image,
        )


class MoviePage(BaseModel):
    """Response model for a page of movies."""

    content: list[MovieDTO]
    number: int
    size: int
    total_elements: int
    total_pages: int

    @classmethod
    def from_page(cls, page: Page[MovieDTO]) -> "MoviePage":
        return cls(
            content=page.content,
            number=page.number,
            size=page.size,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
        )
