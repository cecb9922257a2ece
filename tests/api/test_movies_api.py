"""
API tests for movie endpoints.

Uses FastAPI TestClient with the database dependency pointed at a seeded
in-memory SQLite database.
"""

import pytest
from fastapi.testclient import TestClient

from dsmovie.api.dependencies import get_db
from dsmovie.api.main import app
from dsmovie.database.connection import DatabaseManager
from dsmovie.database.init_db import DEFAULT_PASSWORD, SEED_MOVIES, init_database

ADMIN = ("alex@gmail.com", DEFAULT_PASSWORD)
CLIENT = ("maria@gmail.com", DEFAULT_PASSWORD)

NEW_MOVIE = {
    "title": "Interstellar",
    "score": 0.0,
    "count": 0,
    "image": "https://www.themoviedb.org/t/p/w533_and_h300_bestv2/xJHokMbljvjADYdit5fK5VQsXEG.jpg",
}


@pytest.fixture
def client():
    """TestClient backed by a freshly seeded in-memory database."""
    db_manager = init_database(seed=True, db_manager=DatabaseManager(db_path=":memory:"))

    def override_get_db():
        with db_manager.session_scope() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
    db_manager.close()


class TestReadEndpoints:
    """Tests for GET /api/movies and GET /api/movies/{movie_id}."""

    def test_list_movies(self, client):
        r = client.get("/api/movies")
        assert r.status_code == 200
        data = r.json()
        assert data["total_elements"] == len(SEED_MOVIES)
        assert data["number"] == 0
        assert data["size"] == 20
        assert len(data["content"]) == len(SEED_MOVIES)

    def test_list_movies_by_title(self, client):
        r = client.get("/api/movies", params={"title": "witcher"})
        assert r.status_code == 200
        data = r.json()
        assert data["total_elements"] == 1
        assert data["content"][0]["title"] == "The Witcher"

    def test_list_movies_paged(self, client):
        r = client.get("/api/movies", params={"page": 1, "size": 5})
        assert r.status_code == 200
        data = r.json()
        assert len(data["content"]) == len(SEED_MOVIES) - 5
        assert data["total_pages"] == 2

    def test_get_movie(self, client):
        r = client.get("/api/movies/1")
        assert r.status_code == 200
        data = r.json()
        assert data["id"] == 1
        assert data["title"] == "The Witcher"
        assert data["count"] == 0

    def test_get_movie_not_found(self, client):
        r = client.get("/api/movies/999")
        assert r.status_code == 404
        data = r.json()
        assert data["status"] == 404
        assert data["path"] == "/api/movies/999"
        assert "not found" in data["error"].lower()


class TestWriteEndpoints:
    """Tests for POST, PUT and DELETE on /api/movies."""

    def test_create_movie_requires_credentials(self, client):
        r = client.post("/api/movies", json=NEW_MOVIE)
        assert r.status_code == 401

    def test_create_movie_rejects_wrong_password(self, client):
        r = client.post("/api/movies", json=NEW_MOVIE, auth=("alex@gmail.com", "wrong"))
        assert r.status_code == 401

    def test_create_movie_requires_admin(self, client):
        r = client.post("/api/movies", json=NEW_MOVIE, auth=CLIENT)
        assert r.status_code == 403

    def test_create_movie(self, client):
        r = client.post("/api/movies", json=NEW_MOVIE, auth=ADMIN)
        assert r.status_code == 201
        data = r.json()
        assert data["id"] == len(SEED_MOVIES) + 1
        assert data["title"] == "Interstellar"
        assert r.headers["location"].endswith(f"/api/movies/{data['id']}")

        assert client.get(f"/api/movies/{data['id']}").status_code == 200

    def test_create_movie_invalid_title(self, client):
        r = client.post("/api/movies", json={**NEW_MOVIE, "title": "Up"}, auth=ADMIN)
        assert r.status_code == 422

    def test_update_movie(self, client):
        r = client.put("/api/movies/2", json={**NEW_MOVIE, "title": "Venom 2"}, auth=ADMIN)
        assert r.status_code == 200
        assert r.json()["id"] == 2
        assert client.get("/api/movies/2").json()["title"] == "Venom 2"

    def test_update_movie_not_found(self, client):
        r = client.put("/api/movies/999", json=NEW_MOVIE, auth=ADMIN)
        assert r.status_code == 404

    def test_delete_movie(self, client):
        r = client.delete("/api/movies/3", auth=ADMIN)
        assert r.status_code == 204
        assert client.get("/api/movies/3").status_code == 404

    def test_delete_movie_not_found(self, client):
        r = client.delete("/api/movies/999", auth=ADMIN)
        assert r.status_code == 404

    def test_delete_scored_movie_conflict(self, client):
        r = client.put("/api/scores", json={"movie_id": 4, "value": 4.0}, auth=CLIENT)
        assert r.status_code == 200

        r = client.delete("/api/movies/4", auth=ADMIN)
        assert r.status_code == 409
        assert r.json()["status"] == 409
        assert client.get("/api/movies/4").status_code == 200


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "healthy"
    assert data["movies"] == len(SEED_MOVIES)
