"""Social feed shaping for the X recent-search API and the static fan feed."""

from __future__ import annotations

from typing import Any

from .. import fixtures
from ..utils.datetime_utils import parse_published_at
from ..utils.parsing import as_dict, as_list

X_STATUS_URL = "https://x.com/{username}/status/{tweet_id}"


def _index(items: Any, key: str) -> dict[str, dict]:
    return {str(item[key]): item for item in as_list(items) if isinstance(item, dict) and key in item}


def normalize_x_search(payload: Any) -> dict:
    """Join tweets with their authors and media, newest first."""
    data = as_dict(payload)
    includes = as_dict(data.get("includes"))
    users = _index(includes.get("users"), "id")
    media_by_key = _index(includes.get("media"), "media_key")

    rows = []
    for tweet in as_list(data.get("data")):
        tweet = as_dict(tweet)
        tweet_id = str(tweet.get("id") or "")
        user = users.get(str(tweet.get("author_id")), {})
        username = user.get("username")
        media_keys = as_list(as_dict(tweet.get("attachments")).get("media_keys"))
        rows.append(
            {
                "id": tweet_id,
                "text": tweet.get("text") or "",
                "created_at": tweet.get("created_at"),
                "url": X_STATUS_URL.format(username=username, tweet_id=tweet_id) if username else None,
                "user": {
                    "name": user.get("name"),
                    "username": username,
                    "verified": user.get("verified"),
                    "profile_image_url": user.get("profile_image_url"),
                },
                "metrics": tweet.get("public_metrics"),
                "media": [media_by_key[key] for key in media_keys if key in media_by_key],
            }
        )

    rows.sort(key=lambda row: parse_published_at(row["created_at"]), reverse=True)
    return {"sample": False, "articles": rows}


def sample_payload(rate_limited: bool = False) -> dict:
    payload: dict[str, Any] = {"sample": True, "articles": fixtures.sample_search_rows()}
    if rate_limited:
        payload["rate_limited"] = True
    return payload


def mock_social_feed() -> dict:
    tweets = fixtures.mock_tweets()
    return {"tweets": tweets, "count": len(tweets)}
