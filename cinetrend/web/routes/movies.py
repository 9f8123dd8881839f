"""
Routes du catalogue : liste (recherche ou populaires) et detail d'un film.

Ces routes executent l'operation de l'orchestrateur sans debounce : le
client web se charge d'attendre la fin de la saisie avant d'appeler.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from ...core.errors import CineTrendError
from ...services.search_orchestrator import FETCH_ERROR_MESSAGE, SearchOrchestrator
from ...utils.helpers import normalize_query
from ..deps import get_orchestrator
from ..schemas import MovieDetailResponse, MovieListResponse, MovieResponse

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("", response_model=MovieListResponse)
async def list_movies(
    query: str = "",
    orchestrator: SearchOrchestrator = Depends(get_orchestrator),
) -> MovieListResponse:
    """Films populaires si query est vide, resultats de recherche sinon."""
    try:
        movies = await orchestrator.run_query(query)
    except CineTrendError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=FETCH_ERROR_MESSAGE,
        ) from e
    return MovieListResponse(
        query=normalize_query(query),
        movies=[MovieResponse.model_validate(movie) for movie in movies],
    )


@router.get("/{movie_id}", response_model=MovieDetailResponse)
async def movie_detail(
    movie_id: int,
    orchestrator: SearchOrchestrator = Depends(get_orchestrator),
) -> MovieDetailResponse:
    """Detail d'un film avec casting et videos."""
    detail = await orchestrator.load_details(movie_id)
    if detail.not_found:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail.error_message)
    if detail.item is None:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=detail.error_message)
    return MovieDetailResponse.model_validate(detail.item)
