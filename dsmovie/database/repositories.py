"""
Repository contracts and their SQLAlchemy implementations.

The services only depend on the abstract classes. The SQLAlchemy
repositories flush but never commit; the session owner decides when the
unit of work ends.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from dsmovie.database.errors import EntityNotFoundError, IntegrityConflictError
from dsmovie.database.models import Movie, Score, User
from dsmovie.database.pagination import Page, PageRequest


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so ``text`` matches literally."""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


# ==================== CONTRACTS ====================

class MovieRepository(ABC):
    @abstractmethod
    def find_by_id(self, movie_id: int) -> Optional[Movie]:
        pass

    @abstractmethod
    def search_by_title(self, title: str, page_request: PageRequest) -> Page[Movie]:
        """Movies whose title contains ``title``, ignoring case."""

    @abstractmethod
    def exists_by_id(self, movie_id: int) -> bool:
        pass

    @abstractmethod
    def save(self, movie: Movie) -> Movie:
        pass

    @abstractmethod
    def get_reference_by_id(self, movie_id: int) -> Movie:
        """Return the movie or raise EntityNotFoundError."""

    @abstractmethod
    def delete_by_id(self, movie_id: int) -> None:
        """Delete the movie; raise IntegrityConflictError if scores still reference it."""


class ScoreRepository(ABC):
    @abstractmethod
    def find_by_movie_and_user(self, movie_id: int, user_id: int) -> Optional[Score]:
        pass

    @abstractmethod
    def save_and_flush(self, score: Score) -> Score:
        pass

    @abstractmethod
    def aggregate_by_movie(self, movie_id: int) -> Tuple[float, int]:
        """Mean and number of the stored score values of a movie; (0.0, 0) if none."""


class UserRepository(ABC):
    @abstractmethod
    def find_by_username(self, username: str) -> Optional[User]:
        pass

    @abstractmethod
    def save(self, user: User) -> User:
        pass


# ==================== SQLALCHEMY IMPLEMENTATIONS ====================

class SqlAlchemyMovieRepository(MovieRepository):
    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, movie_id: int) -> Optional[Movie]:
        return self.session.get(Movie, movie_id)

    def search_by_title(self, title: str, page_request: PageRequest) -> Page[Movie]:
        condition = Movie.title.ilike(f"%{escape_like(title or '')}%", escape="\\")
        total = self.session.scalar(
            select(func.count(Movie.id)).where(condition)
        )
        movies = self.session.scalars(
            select(Movie)
            .where(condition)
            .order_by(Movie.id)
            .offset(page_request.offset)
            .limit(page_request.size)
        ).all()
        return Page(
            content=list(movies),
            number=page_request.page,
            size=page_request.size,
            total_elements=total or 0,
        )

    def exists_by_id(self, movie_id: int) -> bool:
        return self.session.scalar(
            select(func.count(Movie.id)).where(Movie.id == movie_id)
        ) > 0

    def save(self, movie: Movie) -> Movie:
        self.session.add(movie)
        self.session.flush()
        return movie

    def get_reference_by_id(self, movie_id: int) -> Movie:
        movie = self.session.get(Movie, movie_id)
        if movie is None:
            raise EntityNotFoundError("Movie", movie_id)
        return movie

    def delete_by_id(self, movie_id: int) -> None:
        # Savepoint: a conflict undoes the delete only, not the caller's work.
        try:
            with self.session.begin_nested():
                self.session.execute(delete(Movie).where(Movie.id == movie_id))
        except IntegrityError as e:
            raise IntegrityConflictError("Movie", movie_id) from e


class SqlAlchemyScoreRepository(ScoreRepository):
    def __init__(self, session: Session):
        self.session = session

    def find_by_movie_and_user(self, movie_id: int, user_id: int) -> Optional[Score]:
        return self.session.get(Score, (movie_id, user_id))

    def save_and_flush(self, score: Score) -> Score:
        self.session.add(score)
        self.session.flush()
        return score

    def aggregate_by_movie(self, movie_id: int) -> Tuple[float, int]:
        mean, total = self.session.execute(
            select(func.avg(Score.value), func.count())
            .where(Score.movie_id == movie_id)
        ).one()
        return float(mean or 0.0), total


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session: Session):
        self.session = session

    def find_by_username(self, username: str) -> Optional[User]:
        return self.session.scalars(
            select(User).where(User.username == username)
        ).first()

    def save(self, user: User) -> User:
        self.session.add(user)
        self.session.flush()
        return user
