from typing import Any, Dict, List, Optional
from brainmate.core.validation import require_fields
from brainmate.core.clock import utc_timestamp
from brainmate.services import keys
from brainmate.services.kv_store import KeyValueStore
import logging

logger = logging.getLogger(__name__)


class LibraryService:
    """
    Saved ("bookmarked") articles.

    Each save writes the article snapshot under its own key and then prepends
    the id to the user's saved list. The two writes are not atomic, and the
    list update is a plain read-modify-write: concurrent saves for the same
    user can drop each other's list entry.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    async def save_article(
        self,
        user_id: Optional[str],
        article_id: Optional[str],
        article: Optional[Dict[str, Any]] = None,
    ) -> Dict:
        require_fields(userId=user_id, articleId=article_id)

        record = dict(article or {})
        record["savedAt"] = utc_timestamp()
        await self.store.set(keys.saved_article_key(user_id, article_id), record)

        saved_list = await self.get_saved_ids(user_id)
        if article_id not in saved_list:
            saved_list = [article_id] + saved_list
            await self.store.set(keys.saved_list_key(user_id), saved_list)

        logger.info(f"User {user_id} saved article {article_id}")
        return {"success": True}

    async def get_saved_ids(self, user_id: str) -> List[str]:
        """
        The user's saved list, or [] when the key holds anything but a list.

        An article id of "list" shares its key with the saved list, so the key
        may hold an article record instead.
        """
        saved_list = await self.store.get(keys.saved_list_key(user_id))
        return saved_list if isinstance(saved_list, list) else []

    async def get_saved_articles(self, user_id: str) -> Dict:
        """Saved articles, most recently saved first."""
        articles = []
        for article_id in await self.get_saved_ids(user_id):
            record = await self.store.get(keys.saved_article_key(user_id, article_id))
            # Ids without a record are skipped rather than failing the listing
            if isinstance(record, dict):
                articles.append(record)
        return {"articles": articles}
