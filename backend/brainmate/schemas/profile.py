from pydantic import BaseModel
from typing import Optional


class ProfileStats(BaseModel):
    savedArticles: int = 0
    totalHighlights: int = 0


class ProfileResponse(BaseModel):
    userId: str
    displayName: str
    bio: str
    avatar: Optional[str] = None
    joinedAt: str  # ISO-8601, fixed at first read
    stats: ProfileStats

    class Config:
        extra = "allow"
