"""
Pydantic data-transfer objects used at the service boundary.
"""

from dsmovie.dto.movie import MovieDTO, MoviePage
from dsmovie.dto.score import ScoreDTO

__all__ = [
    "MovieDTO",
    "MoviePage",
    "ScoreDTO",
]
