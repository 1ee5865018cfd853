from fastapi import APIRouter, Depends
from brainmate.api.deps import get_store
from brainmate.core.errors import storage_failure
from brainmate.schemas.profile import ProfileResponse
from brainmate.services.kv_store import KeyValueStore
from brainmate.services.profile_service import ProfileService

router = APIRouter()


@router.get("/{userId}", response_model=ProfileResponse)
async def get_profile(
    userId: str,
    store: KeyValueStore = Depends(get_store),
):
    """
    Get a user's profile with saved-article and highlight counts.

    Unknown user IDs are provisioned with a default profile on first read.
    """
    with storage_failure("Failed to fetch profile"):
        return await ProfileService(store).get_profile(userId)
