"""
Score submission and movie aggregate recomputation.
"""

import logging

from dsmovie.database.models import Score
from dsmovie.database.repositories import MovieRepository, ScoreRepository
from dsmovie.dto.movie import MovieDTO
from dsmovie.dto.score import ScoreDTO
from dsmovie.services.exceptions import ResourceNotFoundException
from dsmovie.services.user_service import UserService

logger = logging.getLogger(__name__)


class ScoreService:
    """Records the caller's score for a movie and keeps the movie aggregate current."""

    def __init__(
        self,
        user_service: UserService,
        movie_repository: MovieRepository,
        score_repository: ScoreRepository,
    ):
        self.user_service = user_service
        self.movie_repository = movie_repository
        self.score_repository = score_repository

    def save_score(self, dto: ScoreDTO) -> MovieDTO:
        """
        Save the authenticated user's score and recompute the movie aggregate.

        A second submission by the same user replaces the first. The value is
        trusted as validated by the caller.

        Args:
            dto: Target movie and score value

        Returns:
            MovieDTO with the new aggregate

        Raises:
            ResourceNotFoundException: If the movie does not exist
        """
        user = self.user_service.authenticated()

        movie = self.movie_repository.find_by_id(dto.movie_id)
        if movie is None:
            logger.warning("Score submitted for missing movie %s", dto.movie_id)
            raise ResourceNotFoundException("Resource not found")

        score = self.score_repository.find_by_movie_and_user(movie.id, user.id)
        if score is None:
            score = Score(movie=movie, user=user, value=dto.value)
        else:
            score.value = dto.value
        self.score_repository.save_and_flush(score)

        # Recomputed from the stored rows, which include other sessions' commits.
        movie.score, movie.count = self.score_repository.aggregate_by_movie(movie.id)
        movie = self.movie_repository.save(movie)
        logger.info(
            "User %s scored movie %s with %s; aggregate %.3f over %d",
            user.id, movie.id, dto.value, movie.score, movie.count,
        )
        return MovieDTO.from_entity(movie)
