"""
Routes du service de tendances.

POST /trending/search : enregistre une recherche aboutie, retourne l'entree mise a jour
GET /trending : classement des films les plus recherches ([] en cas d'echec)
"""

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger

from ...core.entities.trending import SearchEvent, TrendingEntry
from ...core.errors import StoreUnavailable
from ...services.trending import TrendingService
from ..deps import get_trending_service
from ..schemas import SearchRecordRequest, TrendingEntryResponse

router = APIRouter(prefix="/trending", tags=["trending"])


def _to_response(entry: TrendingEntry) -> TrendingEntryResponse:
    return TrendingEntryResponse(
        movie_id=entry.item_id,
        search_term=entry.search_term,
        poster_url=entry.poster_url,
        count=entry.count,
        updated_at=entry.updated_at,
    )


@router.post("/search", response_model=TrendingEntryResponse)
async def record_search(
    payload: SearchRecordRequest,
    service: TrendingService = Depends(get_trending_service),
) -> TrendingEntryResponse:
    """Incremente le compteur du film ; 503 si le stockage est indisponible."""
    event = SearchEvent(
        term=payload.search_term,
        top_item_id=payload.movie_id,
        poster_url=payload.poster_url or "",
    )
    try:
        entry = await service.record(event)
    except StoreUnavailable as e:
        logger.warning(f"POST /trending/search en echec: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Stockage des tendances indisponible",
        ) from e
    return _to_response(entry)


@router.get("", response_model=list[TrendingEntryResponse])
async def get_trending(
    service: TrendingService = Depends(get_trending_service),
) -> list[TrendingEntryResponse]:
    """Top N des films, du plus recherche au moins recherche."""
    return [_to_response(entry) for entry in await service.get_trending()]
