"""Search API: query PubMed for candidate references."""

import logging

from fastapi import APIRouter, HTTPException

from citeformat.api.schemas import SearchQuery
from citeformat.search.models import SearchResult
from citeformat.search.pubmed import SearchError, search_pubmed

logger = logging.getLogger(__name__)

router = APIRouter(tags=["search"])


@router.post("/search", response_model=list[SearchResult])
def search_endpoint(params: SearchQuery) -> list[SearchResult]:
    # Plain def: FastAPI runs the blocking Entrez calls in its thread pool.
    try:
        return search_pubmed(params.q)
    except SearchError as exc:
        logger.error("%s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
