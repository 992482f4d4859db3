"""GitHub API payload factories for unit tests.

Builds minimal JSON bodies matching what the REST API returns, plus fake
httpx responses wrapping them.
"""

from __future__ import annotations

import httpx


def make_response(
    status_code: int = 200,
    json_data: object = None,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    """Build a fake httpx.Response with the given status, JSON body, and headers."""
    return httpx.Response(
        status_code=status_code,
        json=json_data,
        headers=headers or {},
    )


def contributor_json(
    user_id: int = 1,
    login: str | None = None,
    contributions: int = 10,
    **overrides: object,
) -> dict:
    """Minimal list-contributors item."""
    login = login or f"user{user_id}"
    base = {
        "id": user_id,
        "login": login,
        "avatar_url": f"https://avatars.githubusercontent.com/u/{user_id}",
        "html_url": f"https://github.com/{login}",
        "contributions": contributions,
        "type": "User",
    }
    base.update(overrides)
    return base


def contributor_page(start_id: int, count: int) -> list[dict]:
    """`count` contributors with consecutive ids starting at `start_id`."""
    return [contributor_json(user_id=start_id + i) for i in range(count)]


def user_json(login: str = "octocat", user_id: int = 583231, **overrides: object) -> dict:
    """Minimal get-user response."""
    base = {
        "id": user_id,
        "login": login,
        "avatar_url": f"https://avatars.githubusercontent.com/u/{user_id}",
        "html_url": f"https://github.com/{login}",
        "name": "The Octocat",
        "bio": None,
        "company": "@github",
        "location": "San Francisco",
        "email": None,
        "blog": "https://github.blog",
        "twitter_username": None,
        "public_repos": 8,
        "followers": 9000,
        "following": 9,
        "created_at": "2011-01-25T18:44:36Z",
    }
    base.update(overrides)
    return base


def commit_json(
    sha: str = "6dcb09b5b57875f334f61aebed695e2e4193db5e",
    message: str = "Fix all the bugs",
    date: str = "2026-01-15T12:00:00Z",
    **overrides: object,
) -> dict:
    """Minimal list-commits item."""
    base = {
        "sha": sha,
        "html_url": f"https://github.com/owner/repo/commit/{sha}",
        "commit": {
            "message": message,
            "author": {"name": "Octo", "email": "octo@example.com", "date": date},
            "committer": {"name": "GitHub", "email": "noreply@github.com", "date": date},
        },
    }
    base.update(overrides)
    return base
