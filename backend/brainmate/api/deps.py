from fastapi import Depends
from sqlalchemy.orm import Session
from brainmate.core.database import get_db
from brainmate.services.kv_store import KeyValueStore, SQLAlchemyKeyValueStore


def get_store(db: Session = Depends(get_db)) -> KeyValueStore:
    """Request-scoped key/value store over the request's database session."""
    return SQLAlchemyKeyValueStore(db)
