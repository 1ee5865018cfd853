"""Tests for profiles and their derived statistics."""

import pytest
from brainmate.core.config import settings
from brainmate.services import keys
from brainmate.services.highlight_service import HighlightService
from brainmate.services.library_service import LibraryService
from brainmate.services.profile_service import ProfileService


@pytest.mark.unit
class TestProfileService:
    @pytest.mark.asyncio
    async def test_unknown_user_is_provisioned(self, store):
        profile = await ProfileService(store).get_profile("u-new")

        assert profile["userId"] == "u-new"
        assert profile["displayName"] == settings.DEFAULT_DISPLAY_NAME
        assert profile["bio"] == settings.DEFAULT_BIO
        assert profile["avatar"] is None
        assert profile["stats"] == {"savedArticles": 0, "totalHighlights": 0}
        assert await store.get(keys.profile_key("u-new")) is not None

    @pytest.mark.asyncio
    async def test_joined_at_fixed_at_first_read(self, store):
        service = ProfileService(store)

        first = await service.get_profile("u1")
        second = await service.get_profile("u1")

        assert first["joinedAt"] == second["joinedAt"]

    @pytest.mark.asyncio
    async def test_stats_are_not_persisted(self, memory_store):
        await ProfileService(memory_store).get_profile("u1")

        assert "stats" not in memory_store.data[keys.profile_key("u1")]

    @pytest.mark.asyncio
    async def test_existing_profile_is_returned(self, memory_store):
        stored = {
            "userId": "u1",
            "displayName": "Mina",
            "bio": "Slow reader",
            "avatar": "https://example.com/a.png",
            "joinedAt": "2024-01-01T00:00:00.000Z",
        }
        await memory_store.set(keys.profile_key("u1"), stored)

        profile = await ProfileService(memory_store).get_profile("u1")

        assert profile["displayName"] == "Mina"
        assert profile["joinedAt"] == "2024-01-01T00:00:00.000Z"

    @pytest.mark.asyncio
    async def test_stats_count_saved_articles_and_their_highlights(self, store):
        library = LibraryService(store)
        highlights = HighlightService(store)

        await library.save_article("u1", "a1", {"title": "One"})
        await library.save_article("u1", "a2", {"title": "Two"})
        await highlights.add_highlight("u1", "a1", {"text": "x"})
        await highlights.add_highlight("u1", "a1", {"text": "y"})
        await highlights.add_highlight("u1", "a2", {"text": "z"})

        profile = await ProfileService(store).get_profile("u1")

        assert profile["stats"] == {"savedArticles": 2, "totalHighlights": 3}

    @pytest.mark.asyncio
    async def test_highlights_on_unsaved_articles_not_counted(self, store):
        await LibraryService(store).save_article("u1", "a1", {"title": "One"})
        await HighlightService(store).add_highlight("u1", "a1", {"text": "x"})
        await HighlightService(store).add_highlight("u1", "a9", {"text": "unsaved"})

        stats = await ProfileService(store).compute_stats("u1")

        assert stats == {"savedArticles": 1, "totalHighlights": 1}

    @pytest.mark.asyncio
    async def test_saved_count_matches_list_for_list_article_id(self, store):
        await LibraryService(store).save_article("u1", "list", {"title": "T"})

        stats = await ProfileService(store).compute_stats("u1")

        assert stats == {"savedArticles": 1, "totalHighlights": 0}
