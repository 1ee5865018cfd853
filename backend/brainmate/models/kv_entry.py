from sqlalchemy import Column, String, DateTime, JSON
from datetime import datetime, timezone
from brainmate.core.database import Base


def _utcnow():
    return datetime.now(timezone.utc)


class KVEntry(Base):
    __tablename__ = "kv_store"

    # Keys follow the scheme in brainmate.services.keys, e.g.
    #   "articles:feed:2024-05-01"
    #   "user:<userId>:saved:list"
    #   "user:<userId>:article:<articleId>:highlights"
    key = Column(String, primary_key=True)
    value = Column(JSON, nullable=True)

    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow)
