from pydantic import BaseModel
from typing import Any, Dict, List, Optional


class ArticlePayload(BaseModel):
    """
    Article as sent by the client.

    Open record: no field is type-checked and unknown fields are kept, so
    the stored article is exactly what the client sent.
    """

    id: Any = None
    title: Any = None
    platform: Any = None
    platformIcon: Any = None
    topics: Any = None
    readTime: Any = None  # minutes
    thumbnail: Any = None
    author: Any = None
    excerpt: Any = None
    content: Any = None

    class Config:
        extra = "allow"


class SaveArticleRequest(BaseModel):
    # Presence is checked by the service so missing fields map to 400
    articleId: Any = None
    userId: Any = None
    article: Optional[ArticlePayload] = None

    def article_data(self) -> Dict[str, Any]:
        if self.article is None:
            return {}
        return self.article.model_dump(exclude_unset=True)


class FeedResponse(BaseModel):
    articles: List[Dict[str, Any]]
    readingCount: int
    dailyLimit: int


class SavedArticlesResponse(BaseModel):
    articles: List[Dict[str, Any]]


class SuccessResponse(BaseModel):
    success: bool = True
