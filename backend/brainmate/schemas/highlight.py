from pydantic import BaseModel
from typing import Any, Dict, List, Optional


class HighlightPayload(BaseModel):
    """Highlighted text span; color is one of yellow/green/blue by convention."""

    text: Any = None
    color: Any = None

    class Config:
        extra = "allow"


class AddHighlightRequest(BaseModel):
    articleId: Any = None
    userId: Any = None
    highlight: Optional[HighlightPayload] = None

    def highlight_data(self) -> Optional[Dict[str, Any]]:
        if self.highlight is None:
            return None
        return self.highlight.model_dump(exclude_unset=True)


class HighlightsResponse(BaseModel):
    highlights: List[Dict[str, Any]]


class AddHighlightResponse(HighlightsResponse):
    success: bool = True
