from typing import Any, Dict, List, Optional
from brainmate.core.validation import require_fields
from brainmate.core.clock import utc_now, utc_timestamp, epoch_millis
from brainmate.services import keys
from brainmate.services.kv_store import KeyValueStore
import logging

logger = logging.getLogger(__name__)

# Display colors the client knows how to render. Stored values are not
# checked against this set.
HIGHLIGHT_COLORS = ("yellow", "green", "blue")


class HighlightService:
    """
    Per-(user, article) highlight lists, newest first.

    Adding a highlight reads the whole list, prepends the new record and
    writes the list back. Two concurrent adds on the same pair can both read
    the same list, in which case one of the new highlights is lost.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    async def get_highlights(self, article_id: str, user_id: str) -> Dict:
        key = keys.highlights_key(user_id, article_id)
        return {"highlights": await self.store.get(key) or []}

    async def count_highlights(self, user_id: str, article_id: str) -> int:
        highlights = await self.store.get(keys.highlights_key(user_id, article_id))
        return len(highlights or [])

    async def add_highlight(
        self,
        user_id: Optional[str],
        article_id: Optional[str],
        highlight: Optional[Dict[str, Any]],
    ) -> Dict:
        require_fields(userId=user_id, articleId=article_id, highlight=highlight)

        key = keys.highlights_key(user_id, article_id)
        highlights: List[Dict] = await self.store.get(key) or []

        now = utc_now()
        record = dict(highlight)
        if record.get("color") not in HIGHLIGHT_COLORS:
            logger.debug(f"Storing highlight with unknown color {record.get('color')!r}")
        record["id"] = f"highlight-{epoch_millis(now)}"
        record["createdAt"] = utc_timestamp(now)

        highlights = [record] + highlights
        await self.store.set(key, highlights)

        logger.info(
            f"User {user_id} highlighted article {article_id} "
            f"({len(highlights)} highlights)"
        )
        return {"success": True, "highlights": highlights}
