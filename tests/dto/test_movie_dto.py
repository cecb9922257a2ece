"""
Unit tests for the movie DTO mapping.
"""

import pytest

from dsmovie.dto.movie import MovieDTO, round_score

from tests.factories import create_movie


@pytest.mark.parametrize("stored, shown", [
    (4.25, 4.3),
    (4.35, 4.4),
    (4.24, 4.2),
    (13.0 / 3, 4.3),
    (0.0, 0.0),
    (5.0, 5.0),
])
def test_round_score_rounds_halves_up(stored, shown):
    assert round_score(stored) == shown


def test_from_entity_rounds_score_only():
    movie = create_movie(movie_id=7, title="The Witcher", score=4.25, count=2)

    dto = MovieDTO.from_entity(movie)

    assert dto.id == 7
    assert dto.title == "The Witcher"
    assert dto.score == 4.3
    assert dto.count == 2
    assert movie.score == 4.25


def test_from_entity_without_aggregate():
    dto = MovieDTO.from_entity(create_movie(score=None, count=None))

    assert dto.score == 0.0
    assert dto.count == 0
