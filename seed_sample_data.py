#!/usr/bin/env python3
"""
Script to seed a demo reader directly into the key/value store.
Reads today's feed, saves the first articles, adds a highlight and an
article open, then prints the resulting profile.

Usage: python3 seed_sample_data.py [user_id]
(after `pip install -e .`; DATABASE_URL selects the database)
"""

import asyncio
import os
import sys

# The bearer credential is not used here but settings require one
os.environ.setdefault("API_BEARER_TOKEN", "seed-script")

from brainmate.core.database import Base, SessionLocal, engine
from brainmate.core.errors import StorageError
from brainmate.services.feed_service import FeedService
from brainmate.services.highlight_service import HighlightService
from brainmate.services.kv_store import SQLAlchemyKeyValueStore
from brainmate.services.library_service import LibraryService
from brainmate.services.profile_service import ProfileService
from brainmate.services.reading_counter import ReadingCounterService

SAVE_COUNT = 2


async def seed_reader(user_id: str):
    """Seed saved articles, a highlight and a reading count for one user."""
    print("🔌 Connecting to database...")
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    store = SQLAlchemyKeyValueStore(db)

    try:
        feed = await FeedService(store).get_feed(user_id)
        print(f"✓ Today's feed has {len(feed['articles'])} articles")

        library = LibraryService(store)
        for article in feed["articles"][:SAVE_COUNT]:
            await library.save_article(user_id, article["id"], article)
            print(f"✓ Saved: {article['title']} ({article['id']})")

        first = feed["articles"][0]
        await HighlightService(store).add_highlight(
            user_id, first["id"], {"text": first["excerpt"], "color": "yellow"}
        )
        print(f"✓ Highlighted excerpt of {first['id']}")

        reading = await ReadingCounterService(store).increment(user_id)
        print(
            f"✓ Reading count today: {reading['readingCount']}/{reading['dailyLimit']}"
        )

        profile = await ProfileService(store).get_profile(user_id)
        print()
        print(f"✓ Profile for {profile['userId']} (joined {profile['joinedAt']})")
        print(f"  Saved articles:   {profile['stats']['savedArticles']}")
        print(f"  Total highlights: {profile['stats']['totalHighlights']}")

    except StorageError as e:
        print(f"❌ Error: {e}")
        sys.exit(1)

    finally:
        db.close()
        print()
        print("✓ Database connection closed")


if __name__ == "__main__":
    print("=" * 60)
    print("  Brainmate Sample Data Script")
    print("=" * 60)
    print()

    asyncio.run(seed_reader(sys.argv[1] if len(sys.argv) > 1 else "demo-reader"))
