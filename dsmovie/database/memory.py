"""
In-memory repository implementations.

They hold plain, session-less ORM objects and follow the same contracts as
the SQLAlchemy repositories, including the not-found and dependent-conflict
signals.
"""

from itertools import count
from typing import Dict, Iterable, Optional, Tuple

from dsmovie.database.errors import EntityNotFoundError, IntegrityConflictError
from dsmovie.database.models import Movie, Score, User
from dsmovie.database.pagination import Page, PageRequest
from dsmovie.database.repositories import MovieRepository, ScoreRepository, UserRepository


class InMemoryMovieRepository(MovieRepository):
    def __init__(self, movies: Iterable[Movie] = ()):
        self.movies: Dict[int, Movie] = {}
        self._ids = count(1)
        for movie in movies:
            self.save(movie)

    def find_by_id(self, movie_id: int) -> Optional[Movie]:
        return self.movies.get(movie_id)

    def search_by_title(self, title: str, page_request: PageRequest) -> Page[Movie]:
        needle = (title or "").lower()
        matches = [
            movie for _, movie in sorted(self.movies.items())
            if needle in movie.title.lower()
        ]
        start = page_request.offset
        return Page(
            content=matches[start:start + page_request.size],
            number=page_request.page,
            size=page_request.size,
            total_elements=len(matches),
        )

    def exists_by_id(self, movie_id: int) -> bool:
        return movie_id in self.movies

    def save(self, movie: Movie) -> Movie:
        if movie.id is None:
            movie.id = next(self._ids)
            while movie.id in self.movies:
                movie.id = next(self._ids)
        self.movies[movie.id] = movie
        return movie

    def get_reference_by_id(self, movie_id: int) -> Movie:
        try:
            return self.movies[movie_id]
        except KeyError:
            raise EntityNotFoundError("Movie", movie_id) from None

    def delete_by_id(self, movie_id: int) -> None:
        movie = self.movies.get(movie_id)
        if movie is None:
            return
        if movie.scores:
            raise IntegrityConflictError("Movie", movie_id)
        del self.movies[movie_id]


class InMemoryScoreRepository(ScoreRepository):
    def __init__(self):
        self.scores: Dict[Tuple[int, int], Score] = {}
        self.flush_count = 0

    def find_by_movie_and_user(self, movie_id: int, user_id: int) -> Optional[Score]:
        return self.scores.get((movie_id, user_id))

    def save_and_flush(self, score: Score) -> Score:
        self.scores[(score.movie.id, score.user.id)] = score
        self.flush_count += 1
        return score

    def aggregate_by_movie(self, movie_id: int) -> Tuple[float, int]:
        values = [score.value for (key, _), score in self.scores.items() if key == movie_id]
        if not values:
            return 0.0, 0
        return sum(values) / len(values), len(values)


class InMemoryUserRepository(UserRepository):
    def __init__(self, users: Iterable[User] = ()):
        self.users: Dict[str, User] = {}
        self._ids = count(1)
        for user in users:
            self.save(user)

    def find_by_username(self, username: str) -> Optional[User]:
        return self.users.get(username)

    def save(self, user: User) -> User:
        if user.id is None:
            user.id = next(self._ids)
        self.users[user.username] = user
        return user
