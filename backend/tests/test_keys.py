"""Tests for store key derivation."""

import pytest
from brainmate.services import keys


@pytest.mark.unit
class TestKeyScheme:
    def test_feed_key_is_shared_per_date(self):
        assert keys.feed_key("2024-05-01") == "articles:feed:2024-05-01"

    def test_user_keys(self):
        assert keys.reading_key("u1", "2024-05-01") == "user:u1:reading:2024-05-01"
        assert keys.saved_article_key("u1", "a1") == "user:u1:saved:a1"
        assert keys.saved_list_key("u1") == "user:u1:saved:list"
        assert keys.highlights_key("u1", "a1") == "user:u1:article:a1:highlights"
        assert keys.profile_key("u1") == "user:u1:profile"

    def test_user_keys_are_partitioned_by_user(self):
        assert keys.saved_list_key("u1") != keys.saved_list_key("u2")
        assert keys.highlights_key("u1", "a1") != keys.highlights_key("u2", "a1")

    def test_reading_keys_rotate_by_date(self):
        assert keys.reading_key("u1", "2024-05-01") != keys.reading_key(
            "u1", "2024-05-02"
        )
