from fastapi import APIRouter, Depends
from brainmate.api.deps import get_store
from brainmate.core.errors import storage_failure
from brainmate.schemas.reading import IncrementReadingRequest, ReadingCountResponse
from brainmate.services.kv_store import KeyValueStore
from brainmate.services.reading_counter import ReadingCounterService

router = APIRouter()


@router.post("/increment", response_model=ReadingCountResponse)
async def increment_reading(
    body: IncrementReadingRequest,
    store: KeyValueStore = Depends(get_store),
):
    """Record one article open for today. No upper bound is enforced."""
    with storage_failure("Failed to increment reading count"):
        return await ReadingCounterService(store).increment(body.userId)
