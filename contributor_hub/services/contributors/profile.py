"""Contributor profile page data: detail and commits loaded side by side."""

import asyncio
import logging
from collections.abc import Sequence

from contributor_hub.services.contributors.repository import ContributorRepository
from contributor_hub.services.contributors.types import (
    Commit,
    CommitActivity,
    ContributorProfile,
)
from contributor_hub.services.github.exceptions import GitHubAPIError

logger = logging.getLogger(__name__)


async def load_contributor_profile(
    repository: ContributorRepository, login: str
) -> ContributorProfile:
    """
    Fetch a contributor's detail and commits concurrently.

    The two requests settle independently: an API error in one is recorded in
    `errors` and the other's result is still returned. Anything that is not a
    GitHubAPIError (including cancellation) propagates.
    """
    detail_result, commits_result = await asyncio.gather(
        repository.fetch_contributor_detail(login),
        repository.fetch_contributor_commits(login),
        return_exceptions=True,
    )

    profile = ContributorProfile(login=login)

    if isinstance(detail_result, GitHubAPIError):
        logger.warning(f"Detail fetch failed for {login}: {detail_result.message}")
        profile.errors["detail"] = detail_result
    elif isinstance(detail_result, BaseException):
        raise detail_result
    else:
        profile.detail = detail_result

    if isinstance(commits_result, GitHubAPIError):
        logger.warning(f"Commit fetch failed for {login}: {commits_result.message}")
        profile.errors["commits"] = commits_result
    elif isinstance(commits_result, BaseException):
        raise commits_result
    else:
        profile.commits = commits_result

    return profile


def summarize_commits(commits: Sequence[Commit]) -> CommitActivity:
    """Summarize a newest-first commit list without re-sorting it."""
    if not commits:
        return CommitActivity(total_commits=0, latest_commit_date=None, earliest_commit_date=None)

    return CommitActivity(
        total_commits=len(commits),
        latest_commit_date=commits[0].author_date or None,
        earliest_commit_date=commits[-1].author_date or None,
    )
