"""
Service layer: movie CRUD, score submission and the current-user lookup.
"""

from dsmovie.services.exceptions import (
    ServiceException,
    ResourceNotFoundException,
    DatabaseException,
    UnauthorizedException,
)
from dsmovie.services.movie_service import MovieService
from dsmovie.services.score_service import ScoreService
from dsmovie.services.user_service import UserService

__all__ = [
    "ServiceException",
    "ResourceNotFoundException",
    "DatabaseException",
    "UnauthorizedException",
    "MovieService",
    "ScoreService",
    "UserService",
]
