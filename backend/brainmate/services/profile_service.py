from typing import Dict, Optional
from brainmate.core.clock import utc_timestamp
from brainmate.core.config import settings
from brainmate.services import keys
from brainmate.services.highlight_service import HighlightService
from brainmate.services.kv_store import KeyValueStore
from brainmate.services.library_service import LibraryService
import logging

logger = logging.getLogger(__name__)


class ProfileService:
    """
    Profile records and their derived reading statistics.

    Any user ID gets a profile: the first read provisions one with defaults
    and fixes its joinedAt. Statistics are never stored; they are recomputed
    from the saved list on every request.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store
        self.library = LibraryService(store)
        self.highlights = HighlightService(store)

    def default_profile(self, user_id: str) -> Dict:
        return {
            "userId": user_id,
            "displayName": settings.DEFAULT_DISPLAY_NAME,
            "bio": settings.DEFAULT_BIO,
            "avatar": None,
            "joinedAt": utc_timestamp(),
        }

    async def get_or_create_profile(self, user_id: str) -> Dict:
        key = keys.profile_key(user_id)
        profile: Optional[Dict] = await self.store.get(key)

        if not profile:
            profile = self.default_profile(user_id)
            await self.store.set(key, profile)
            logger.info(f"Provisioned profile for user {user_id}")

        return profile

    async def compute_stats(self, user_id: str) -> Dict[str, int]:
        """
        Count saved articles and the highlights on them.

        Highlights on articles that are not in the saved list are not counted.
        """
        saved_ids = await self.library.get_saved_ids(user_id)

        total_highlights = 0
        for article_id in saved_ids:
            total_highlights += await self.highlights.count_highlights(
                user_id, article_id
            )

        return {"savedArticles": len(saved_ids), "totalHighlights": total_highlights}

    async def get_profile(self, user_id: str) -> Dict:
        profile = await self.get_or_create_profile(user_id)
        stats = await self.compute_stats(user_id)
        return {**profile, "stats": stats}
