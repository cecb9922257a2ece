"""
Unit tests for ScoreService.

Uses in-memory repositories; the authenticated user is resolved through a
real UserService over an in-memory user repository.
"""

import pytest

from dsmovie.database.memory import (
    InMemoryMovieRepository,
    InMemoryScoreRepository,
    InMemoryUserRepository,
)
from dsmovie.dto.score import ScoreDTO
from dsmovie.services import ResourceNotFoundException, ScoreService, UnauthorizedException, UserService

from tests.factories import create_movie, create_score, create_score_dto, create_user

EXISTING_ID = 1
NON_EXISTING_ID = 2


@pytest.fixture
def movie_repository():
    return InMemoryMovieRepository([create_movie(movie_id=EXISTING_ID)])


@pytest.fixture
def score_repository():
    return InMemoryScoreRepository()


@pytest.fixture
def user_repository():
    return InMemoryUserRepository([
        create_user(username="maria@gmail.com"),
        create_user(username="alex@gmail.com", authorities=("ROLE_CLIENT", "ROLE_ADMIN")),
    ])


def make_service(username, user_repository, movie_repository, score_repository):
    return ScoreService(
        UserService(user_repository, username),
        movie_repository,
        score_repository,
    )


@pytest.fixture
def service(user_repository, movie_repository, score_repository):
    return make_service("maria@gmail.com", user_repository, movie_repository, score_repository)


class TestSaveScore:
    """Tests for score submission."""

    def test_save_score_returns_movie_dto(self, service):
        result = service.save_score(create_score_dto(movie_id=EXISTING_ID, value=4.0))

        assert result is not None
        assert result.id == EXISTING_ID

    def test_first_score_sets_aggregate_and_count(self, service, movie_repository):
        result = service.save_score(create_score_dto(movie_id=EXISTING_ID, value=4.0))

        assert result.score == 4.0
        assert result.count == 1
        movie = movie_repository.find_by_id(EXISTING_ID)
        assert movie.score == 4.0
        assert movie.count == 1

    def test_save_score_raises_when_movie_does_not_exist(self, service, score_repository):
        with pytest.raises(ResourceNotFoundException):
            service.save_score(create_score_dto(movie_id=NON_EXISTING_ID, value=4.0))

        assert score_repository.scores == {}
        assert score_repository.flush_count == 0

    def test_second_score_from_same_user_updates(self, service, score_repository):
        service.save_score(create_score_dto(movie_id=EXISTING_ID, value=2.0))

        result = service.save_score(create_score_dto(movie_id=EXISTING_ID, value=5.0))

        assert result.count == 1
        assert result.score == 5.0
        assert len(score_repository.scores) == 1

    def test_scores_from_different_users_are_averaged(
        self, service, user_repository, movie_repository, score_repository
    ):
        other = make_service("alex@gmail.com", user_repository, movie_repository, score_repository)

        service.save_score(create_score_dto(movie_id=EXISTING_ID, value=4.0))
        result = other.save_score(create_score_dto(movie_id=EXISTING_ID, value=3.0))

        assert result.count == 2
        assert result.score == 3.5

    def test_aggregate_rounded_only_in_dto(
        self, service, user_repository, movie_repository, score_repository
    ):
        """The stored mean keeps full precision; the DTO shows one decimal."""
        user_repository.save(create_user(username="joao@gmail.com"))
        second = make_service("alex@gmail.com", user_repository, movie_repository, score_repository)
        third = make_service("joao@gmail.com", user_repository, movie_repository, score_repository)

        service.save_score(create_score_dto(movie_id=EXISTING_ID, value=4.0))
        second.save_score(create_score_dto(movie_id=EXISTING_ID, value=4.0))
        result = third.save_score(create_score_dto(movie_id=EXISTING_ID, value=5.0))

        assert result.score == 4.3
        assert movie_repository.find_by_id(EXISTING_ID).score == pytest.approx(13.0 / 3)

    def test_out_of_range_value_is_accepted_arithmetically(self, service):
        dto = ScoreDTO.model_construct(movie_id=EXISTING_ID, value=7.0)

        result = service.save_score(dto)

        assert result.score == 7.0
        assert result.count == 1

    def test_unknown_user_is_rejected(self, user_repository, movie_repository, score_repository):
        service = make_service("nobody@gmail.com", user_repository, movie_repository, score_repository)

        with pytest.raises(UnauthorizedException):
            service.save_score(create_score_dto(movie_id=EXISTING_ID))

        assert score_repository.flush_count == 0

    def test_aggregate_half_rounds_up(
        self, service, user_repository, movie_repository, score_repository
    ):
        other = make_service("alex@gmail.com", user_repository, movie_repository, score_repository)

        service.save_score(create_score_dto(movie_id=EXISTING_ID, value=4.0))
        result = other.save_score(create_score_dto(movie_id=EXISTING_ID, value=4.5))

        assert movie_repository.find_by_id(EXISTING_ID).score == 4.25
        assert result.score == 4.3

    def test_aggregate_counts_scores_already_stored(
        self, service, user_repository, movie_repository, score_repository
    ):
        """Scores saved outside this service call still count toward the aggregate."""
        alex = user_repository.find_by_username("alex@gmail.com")
        score_repository.save_and_flush(
            create_score(movie_repository.find_by_id(EXISTING_ID), alex, value=1.0)
        )

        result = service.save_score(create_score_dto(movie_id=EXISTING_ID, value=5.0))

        assert result.count == 2
        assert result.score == 3.0


def test_aggregate_of_movie_without_scores(score_repository):
    assert score_repository.aggregate_by_movie(EXISTING_ID) == (0.0, 0)
