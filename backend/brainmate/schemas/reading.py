from pydantic import BaseModel
from typing import Any


class IncrementReadingRequest(BaseModel):
    userId: Any = None


class ReadingCountResponse(BaseModel):
    readingCount: int
    dailyLimit: int
