from typing import Dict, List, Optional
from brainmate.core.clock import utc_now, utc_today
from brainmate.core.config import settings
from brainmate.services import keys
from brainmate.services.feed_generator import FeedGenerator
from brainmate.services.kv_store import KeyValueStore
from brainmate.services.reading_counter import ReadingCounterService
import logging

logger = logging.getLogger(__name__)


class FeedService:
    """
    Serves the shared daily feed and the caller's reading count.

    The feed is generated lazily by the first request of each UTC day and
    cached under that day's key. Two requests racing on an empty day may both
    generate and write a feed; the last write wins and later requests see
    that one.
    """

    def __init__(
        self,
        store: KeyValueStore,
        generator: Optional[FeedGenerator] = None,
        daily_limit: Optional[int] = None,
    ):
        self.store = store
        self.generator = generator or FeedGenerator(size=settings.FEED_SIZE)
        self.daily_limit = settings.DAILY_LIMIT if daily_limit is None else daily_limit

    async def get_daily_feed(self, date: Optional[str] = None) -> List[Dict]:
        now = utc_now()
        date = date or utc_today(now)
        key = keys.feed_key(date)

        feed = await self.store.get(key)
        if not feed:
            feed = self.generator.generate(now)
            await self.store.set(key, feed)
            logger.info(f"Generated daily feed for {date} with {len(feed)} articles")

        return feed

    async def get_feed(self, user_id: str) -> Dict:
        today = utc_today()
        articles = await self.get_daily_feed(today)
        reading_count = await ReadingCounterService(self.store).get_count(user_id, today)

        return {
            "articles": articles,
            "readingCount": reading_count,
            "dailyLimit": self.daily_limit,
        }
