from brainmate.schemas.article import (
    ArticlePayload,
    SaveArticleRequest,
    FeedResponse,
    SavedArticlesResponse,
    SuccessResponse,
)
from brainmate.schemas.highlight import (
    HighlightPayload,
    AddHighlightRequest,
    HighlightsResponse,
    AddHighlightResponse,
)
from brainmate.schemas.reading import IncrementReadingRequest, ReadingCountResponse
from brainmate.schemas.profile import ProfileStats, ProfileResponse

__all__ = [
    "ArticlePayload",
    "SaveArticleRequest",
    "FeedResponse",
    "SavedArticlesResponse",
    "SuccessResponse",
    "HighlightPayload",
    "AddHighlightRequest",
    "HighlightsResponse",
    "AddHighlightResponse",
    "IncrementReadingRequest",
    "ReadingCountResponse",
    "ProfileStats",
    "ProfileResponse",
]
