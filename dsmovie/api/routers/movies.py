"""
Movie API endpoints.
"""

from fastapi import APIRouter, Depends, Query, Request, Response, status

from dsmovie.api.dependencies import get_movie_service, require_admin
from dsmovie.database.pagination import PageRequest
from dsmovie.dto.movie import MovieDTO, MoviePage
from dsmovie.services import MovieService

router = APIRouter(prefix="/api/movies", tags=["movies"])


@router.get("", response_model=MoviePage)
def list_movies(
    title: str = Query(""),
    page: int = Query(0, ge=0),
    size: int = Query(20, ge=1, le=100),
    service: MovieService = Depends(get_movie_service),
):
    """Search movies by title with pagination."""
    result = service.find_all(title, PageRequest(page=page, size=size))
    return MoviePage.from_page(result)


@router.get("/{movie_id}", response_model=MovieDTO)
def get_movie(movie_id: int, service: MovieService = Depends(get_movie_service)):
    """Get movie details by ID."""
    return service.find_by_id(movie_id)


@router.post(
    "",
    response_model=MovieDTO,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_movie(
    movie_in: MovieDTO,
    request: Request,
    response: Response,
    service: MovieService = Depends(get_movie_service),
):
    """Create a movie (admin only)."""
    movie = service.insert(movie_in)
    response.headers["Location"] = str(request.url_for("get_movie", movie_id=movie.id))
    return movie


@router.put("/{movie_id}", response_model=MovieDTO, dependencies=[Depends(require_admin)])
def update_movie(
    movie_id: int,
    movie_in: MovieDTO,
    service: MovieService = Depends(get_movie_service),
):
    """Replace a movie's fields (admin only)."""
    return service.update(movie_id, movie_in)


@router.delete(
    "/{movie_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
def delete_movie(movie_id: int, service: MovieService = Depends(get_movie_service)):
    """Delete a movie without scores (admin only)."""
    service.delete(movie_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
