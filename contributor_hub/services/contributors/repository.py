"""
Contributor repository.

Fetches and normalizes contributor data for one GitHub repository:
- The full contributor roster (paginated)
- A single contributor's profile
- A single page of a contributor's commits

The repository keeps configuration only. Every call builds a fresh result,
so concurrent calls for the same login never share state.
"""

import logging
from typing import Any
from urllib.parse import quote

from contributor_hub.config import settings
from contributor_hub.services.contributors.normalize import (
    normalize_commit,
    normalize_contributor,
    normalize_contributor_detail,
)
from contributor_hub.services.contributors.types import Commit, Contributor, ContributorDetail
from contributor_hub.services.github.client import GitHubClient
from contributor_hub.services.github.constants import EMPTY_REPOSITORY_STATUS
from contributor_hub.services.github.exceptions import (
    ContributorNotFound,
    GitHubNotFound,
    GitHubUpstreamError,
    PaginationLimitExceeded,
)

logger = logging.getLogger(__name__)


def _expect_list(payload: Any, path: str) -> list[dict[str, Any]]:
    """Treat 204 (None) as empty; anything else that is not a list is malformed."""
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise GitHubUpstreamError(200, f"Expected a JSON array from {path}")
    return payload


class ContributorRepository:
    """
    Read operations for a repository's contributors.

    Errors from the client pass through unchanged, except a 404 on the
    profile lookup, which becomes ContributorNotFound. No operation retries.
    """

    def __init__(
        self,
        client: GitHubClient | None = None,
        owner: str | None = None,
        repo: str | None = None,
        page_size: int | None = None,
        max_pages: int | None = None,
        commits_per_page: int | None = None,
    ):
        self.client = client or GitHubClient()
        self.owner = owner or settings.github_repo_owner
        self.repo = repo or settings.github_repo_name
        self.page_size = page_size or settings.contributors_page_size
        self.max_pages = max_pages or settings.contributors_max_pages
        self.commits_per_page = commits_per_page or settings.commits_per_page

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    async def fetch_contributors(self) -> list[Contributor]:
        """
        Fetch the complete contributor roster.

        Requests pages of `page_size` until one comes back short. Pages are
        concatenated in the order GitHub returned them; ranking is left to
        the view functions.

        Returns:
            All contributors, in roster order

        Raises:
            PaginationLimitExceeded: `max_pages` full pages without reaching the end
            GitHubAPIError: First error from any page. No partial list is returned.
        """
        path = f"/repos/{self.owner}/{self.repo}/contributors"
        contributors: list[Contributor] = []
        seen_ids: set[int] = set()

        for page in range(1, self.max_pages + 1):
            payload = await self.client.get(
                path, params={"per_page": self.page_size, "page": page}
            )
            items = _expect_list(payload, path)
            logger.debug(f"{self.full_name}: contributors page {page} returned {len(items)} items")
            if len(items) > self.page_size:
                raise GitHubUpstreamError(
                    200,
                    f"Page {page} of {path} returned {len(items)} items "
                    f"for per_page={self.page_size}",
                )

            for item in items:
                try:
                    contributor = normalize_contributor(item)
                except (AttributeError, KeyError, TypeError, ValueError) as e:
                    raise GitHubUpstreamError(
                        200, f"Malformed contributor entry on page {page} of {path}"
                    ) from e
                if contributor.id in seen_ids:
                    # Roster shifted between page requests
                    logger.warning(
                        f"{self.full_name}: duplicate contributor {contributor.login} "
                        f"(id={contributor.id}) on page {page}, keeping first occurrence"
                    )
                    continue
                seen_ids.add(contributor.id)
                contributors.append(contributor)

            if len(items) < self.page_size:
                logger.info(
                    f"{self.full_name}: fetched {len(contributors)} contributors "
                    f"in {page} page(s)"
                )
                return contributors

        logger.warning(
            f"{self.full_name}: contributor roster exceeded {self.max_pages} pages "
            f"of {self.page_size}"
        )
        raise PaginationLimitExceeded(self.max_pages, self.page_size)

    async def fetch_contributor_detail(self, login: str) -> ContributorDetail:
        """
        Fetch the extended profile for a contributor.

        Args:
            login: GitHub username

        Returns:
            ContributorDetail with absent fields set to None

        Raises:
            ContributorNotFound: GitHub has no user with this login
            GitHubAPIError: Any other failure, unchanged
        """
        path = f"/users/{quote(login, safe='')}"
        try:
            payload = await self.client.get(path)
        except GitHubNotFound as e:
            logger.info(f"Contributor {login} not found")
            raise ContributorNotFound(login) from e

        if not isinstance(payload, dict):
            raise GitHubUpstreamError(200, f"Expected a JSON object from {path}")
        try:
            return normalize_contributor_detail(payload)
        except (KeyError, TypeError) as e:
            raise GitHubUpstreamError(200, f"Malformed user payload from {path}") from e

    async def fetch_contributor_commits(self, login: str) -> list[Commit]:
        """
        Fetch the most recent commits a contributor authored in the repository.

        A single page of `commits_per_page`, newest first, in GitHub's order.

        Args:
            login: GitHub username used as the author filter

        Returns:
            Commits, or an empty list when the contributor has none
        """
        path = f"/repos/{self.owner}/{self.repo}/commits"
        try:
            payload = await self.client.get(
                path, params={"author": login, "per_page": self.commits_per_page}
            )
        except GitHubUpstreamError as e:
            if e.status_code == EMPTY_REPOSITORY_STATUS:
                logger.debug(f"{self.full_name} has no commits yet")
                return []
            raise

        items = _expect_list(payload, path)
        try:
            return [normalize_commit(item) for item in items]
        except (AttributeError, KeyError, TypeError) as e:
            raise GitHubUpstreamError(200, f"Malformed commit entry from {path}") from e
