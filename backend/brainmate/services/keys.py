"""
Canonical store keys.

All coordination between requests happens through key agreement, so every
service derives its keys here and nowhere else.
"""


def feed_key(date: str) -> str:
    return f"articles:feed:{date}"


def reading_key(user_id: str, date: str) -> str:
    return f"user:{user_id}:reading:{date}"


def saved_article_key(user_id: str, article_id: str) -> str:
    return f"user:{user_id}:saved:{article_id}"


def saved_list_key(user_id: str) -> str:
    return f"user:{user_id}:saved:list"


def highlights_key(user_id: str, article_id: str) -> str:
    return f"user:{user_id}:article:{article_id}:highlights"


def profile_key(user_id: str) -> str:
    return f"user:{user_id}:profile"
