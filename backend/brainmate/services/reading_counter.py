from typing import Dict, Optional
from brainmate.core.validation import require_fields
from brainmate.core.clock import utc_today
from brainmate.core.config import settings
from brainmate.services import keys
from brainmate.services.kv_store import KeyValueStore
import logging

logger = logging.getLogger(__name__)


class ReadingCounterService:
    """
    Per-user, per-UTC-day count of article opens.

    The daily limit is reported for display only; increments past it are
    accepted. Counters reset by key rotation at UTC midnight.
    """

    def __init__(self, store: KeyValueStore, daily_limit: Optional[int] = None):
        self.store = store
        self.daily_limit = settings.DAILY_LIMIT if daily_limit is None else daily_limit

    async def get_count(self, user_id: str, date: Optional[str] = None) -> int:
        value = await self.store.get(keys.reading_key(user_id, date or utc_today()))
        if isinstance(value, bool) or not isinstance(value, int):
            return 0
        return value

    async def increment(self, user_id: Optional[str]) -> Dict:
        require_fields("Missing userId", userId=user_id)

        today = utc_today()
        # Read-then-write: concurrent increments can lose counts
        count = await self.get_count(user_id, today) + 1
        await self.store.set(keys.reading_key(user_id, today), count)

        if count > self.daily_limit:
            logger.info(
                f"User {user_id} read {count} articles today (limit {self.daily_limit})"
            )

        return {"readingCount": count, "dailyLimit": self.daily_limit}
