"""
Movie CRUD operations.
"""

import logging

from dsmovie.database.errors import EntityNotFoundError, IntegrityConflictError
from dsmovie.database.models import Movie
from dsmovie.database.pagination import Page, PageRequest
from dsmovie.database.repositories import MovieRepository
from dsmovie.dto.movie import MovieDTO
from dsmovie.services.exceptions import DatabaseException, ResourceNotFoundException

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Resource not found"
INTEGRITY_MESSAGE = "Referential integrity failure"


class MovieService:
    """Movie lookups and mutations, exchanged as MovieDTO."""

    def __init__(self, repository: MovieRepository):
        self.repository = repository

    def find_all(self, title: str, page_request: PageRequest) -> Page[MovieDTO]:
        """
        Search movies by title.

        Args:
            title: Case-insensitive fragment of the title; empty matches all
            page_request: Page to return

        Returns:
            Page of MovieDTO, possibly empty
        """
        page = self.repository.search_by_title(title, page_request)
        return page.map(MovieDTO.from_entity)

    def find_by_id(self, movie_id: int) -> MovieDTO:
        movie = self.repository.find_by_id(movie_id)
        if movie is None:
            raise ResourceNotFoundException(NOT_FOUND_MESSAGE)
        return MovieDTO.from_entity(movie)

    def insert(self, dto: MovieDTO) -> MovieDTO:
        movie = Movie()
        self._copy_dto_to_entity(dto, movie)
        movie = self.repository.save(movie)
        logger.info("Inserted movie %s", movie.id)
        return MovieDTO.from_entity(movie)

    def update(self, movie_id: int, dto: MovieDTO) -> MovieDTO:
        """
        Overwrite a movie's fields.

        Raises:
            ResourceNotFoundException: If no movie has ``movie_id``
        """
        try:
            movie = self.repository.get_reference_by_id(movie_id)
        except EntityNotFoundError:
            logger.warning("Update of missing movie %s", movie_id)
            raise ResourceNotFoundException(NOT_FOUND_MESSAGE) from None
        self._copy_dto_to_entity(dto, movie)
        movie = self.repository.save(movie)
        logger.info("Updated movie %s", movie_id)
        return MovieDTO.from_entity(movie)

    def delete(self, movie_id: int) -> None:
        """
        Delete a movie.

        Raises:
            ResourceNotFoundException: If no movie has ``movie_id``
            DatabaseException: If scores still reference the movie
        """
        if not self.repository.exists_by_id(movie_id):
            raise ResourceNotFoundException(NOT_FOUND_MESSAGE)
        try:
            self.repository.delete_by_id(movie_id)
        except IntegrityConflictError as e:
            logger.warning("Refused to delete movie %s: %s", movie_id, e)
            raise DatabaseException(INTEGRITY_MESSAGE) from e
        logger.info("Deleted movie %s", movie_id)

    @staticmethod
    def _copy_dto_to_entity(dto: MovieDTO, movie: Movie) -> None:
        movie.title = dto.title
        movie.score = dto.score
        movie.count = dto.count
        movie.image = dto.image
