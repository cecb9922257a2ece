"""
Score API endpoints.
"""

from fastapi import APIRouter, Depends

from dsmovie.api.dependencies import get_score_service
from dsmovie.dto.movie import MovieDTO
from dsmovie.dto.score import ScoreDTO
from dsmovie.services import ScoreService

router = APIRouter(prefix="/api/scores", tags=["scores"])


@router.put("", response_model=MovieDTO)
def save_score(score_in: ScoreDTO, service: ScoreService = Depends(get_score_service)):
    """Rate a movie as the authenticated user and return the updated movie."""
    return service.save_score(score_in)
