"""Convert raw GitHub API payloads into contributor records."""

from typing import Any

from contributor_hub.services.contributors.types import Commit, Contributor, ContributorDetail


def _optional_text(value: Any) -> str | None:
    """GitHub sends "" or null for unset profile fields; both mean absent."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def normalize_contributor(data: dict[str, Any]) -> Contributor:
    """Convert a list-contributors item to a Contributor."""
    return Contributor(
        id=data["id"],
        login=data["login"],
        avatar_url=data.get("avatar_url") or "",
        profile_url=data.get("html_url") or "",
        contributions=max(int(data.get("contributions") or 0), 0),
    )


def normalize_contributor_detail(data: dict[str, Any]) -> ContributorDetail:
    """Convert a get-user response to a ContributorDetail."""
    return ContributorDetail(
        id=data["id"],
        login=data["login"],
        avatar_url=data.get("avatar_url") or "",
        profile_url=data.get("html_url") or "",
        name=_optional_text(data.get("name")),
        bio=_optional_text(data.get("bio")),
        company=_optional_text(data.get("company")),
        location=_optional_text(data.get("location")),
        email=_optional_text(data.get("email")),
        blog_url=_optional_text(data.get("blog")),
        twitter_handle=_optional_text(data.get("twitter_username")),
        public_repo_count=data.get("public_repos") or 0,
        follower_count=data.get("followers") or 0,
        following_count=data.get("following") or 0,
        created_at=data.get("created_at"),
    )


def normalize_commit(data: dict[str, Any]) -> Commit:
    """Convert a list-commits item to a Commit."""
    commit = data.get("commit") or {}
    author = commit.get("author") or {}
    committer = commit.get("committer") or {}
    return Commit(
        sha=data["sha"],
        message=commit.get("message") or "",
        author_date=author.get("date") or committer.get("date") or "",
        html_url=data.get("html_url") or "",
    )
