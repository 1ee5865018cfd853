from fastapi import APIRouter, Depends, Query
from brainmate.api.deps import get_store
from brainmate.core.errors import storage_failure
from brainmate.schemas.article import (
    SaveArticleRequest,
    FeedResponse,
    SavedArticlesResponse,
    SuccessResponse,
)
from brainmate.services.feed_service import FeedService
from brainmate.services.kv_store import KeyValueStore
from brainmate.services.library_service import LibraryService

router = APIRouter()


@router.get("/feed", response_model=FeedResponse)
async def get_feed(
    userId: str = Query("default"),
    store: KeyValueStore = Depends(get_store),
):
    """
    Get today's shared feed plus the caller's reading count.

    - Generates and caches the feed on the first request of the UTC day
    - dailyLimit is advisory; all articles are returned regardless of count
    """
    with storage_failure("Failed to fetch feed"):
        return await FeedService(store).get_feed(userId)


@router.post("/save", response_model=SuccessResponse)
async def save_article(
    body: SaveArticleRequest,
    store: KeyValueStore = Depends(get_store),
):
    """Save (bookmark) an article for a user. Saving twice does not duplicate it."""
    with storage_failure("Failed to save article"):
        return await LibraryService(store).save_article(
            body.userId, body.articleId, body.article_data()
        )


@router.get("/saved", response_model=SavedArticlesResponse)
async def get_saved_articles(
    userId: str = Query("default"),
    store: KeyValueStore = Depends(get_store),
):
    """Get a user's saved articles, most recently saved first."""
    with storage_failure("Failed to fetch saved articles"):
        return await LibraryService(store).get_saved_articles(userId)
