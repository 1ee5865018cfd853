from fastapi import APIRouter, Depends, Query
from brainmate.api.deps import get_store
from brainmate.core.errors import storage_failure
from brainmate.schemas.highlight import (
    AddHighlightRequest,
    HighlightsResponse,
    AddHighlightResponse,
)
from brainmate.services.highlight_service import HighlightService
from brainmate.services.kv_store import KeyValueStore

router = APIRouter()


@router.post("/add", response_model=AddHighlightResponse)
async def add_highlight(
    body: AddHighlightRequest,
    store: KeyValueStore = Depends(get_store),
):
    """
    Add a highlight to an article.

    Returns the full highlight list for the (user, article) pair, newest first.
    """
    with storage_failure("Failed to add highlight"):
        return await HighlightService(store).add_highlight(
            body.userId, body.articleId, body.highlight_data()
        )


@router.get("/{articleId}", response_model=HighlightsResponse)
async def get_highlights(
    articleId: str,
    userId: str = Query("default"),
    store: KeyValueStore = Depends(get_store),
):
    with storage_failure("Failed to fetch highlights"):
        return await HighlightService(store).get_highlights(articleId, userId)
