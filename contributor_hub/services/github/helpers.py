"""
GitHub API helper utilities.

Provides rate limit header parsing and the mapping from non-success
responses to the typed exceptions in `exceptions.py`.
"""

import logging

import httpx

from contributor_hub.services.github.constants import RATE_LIMIT_STATUSES
from contributor_hub.services.github.exceptions import (
    GitHubNotFound,
    GitHubRateLimited,
    GitHubUnauthorized,
    GitHubUpstreamError,
)

logger = logging.getLogger(__name__)


def _parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


class RateLimitInfo:
    """Rate limit information from GitHub API response."""

    def __init__(self, response: httpx.Response) -> None:
        self.remaining = response.headers.get("X-RateLimit-Remaining")
        self.reset = response.headers.get("X-RateLimit-Reset")
        self.retry_after = response.headers.get("Retry-After")

    @property
    def reset_timestamp(self) -> int | None:
        """Get reset timestamp as integer, or None if not available."""
        return _parse_int(self.reset)

    @property
    def retry_after_seconds(self) -> int | None:
        """Get Retry-After as seconds, or None if absent or not numeric."""
        return _parse_int(self.retry_after)

    @property
    def is_exhausted(self) -> bool:
        """Check if rate limit is exhausted."""
        return _parse_int(self.remaining) == 0

    @property
    def is_rate_limited(self) -> bool:
        """Exhausted primary limit, or a secondary limit signalled via Retry-After."""
        return self.is_exhausted or self.retry_after is not None


def handle_error_response(response: httpx.Response, resource: str) -> None:
    """
    Raise the typed exception matching a non-success GitHub response.

    Args:
        response: The HTTP response from GitHub API
        resource: What was requested, for error context (e.g. "/users/octocat")

    Raises:
        GitHubUnauthorized: 401
        GitHubNotFound: 404
        GitHubRateLimited: 429, or 403 carrying rate limit headers
        GitHubUpstreamError: any other non-2xx status
    """
    status = response.status_code
    if response.is_success:
        return

    rate_info = RateLimitInfo(response)

    if status == 401:
        raise GitHubUnauthorized()
    if status == 404:
        raise GitHubNotFound(f"Resource not found: {resource}")
    if status in RATE_LIMIT_STATUSES and (status == 429 or rate_info.is_rate_limited):
        logger.warning(
            f"GitHub rate limit hit on {resource} (status={status}, "
            f"retry_after={rate_info.retry_after}, reset={rate_info.reset})"
        )
        raise GitHubRateLimited(
            status,
            retry_after=rate_info.retry_after_seconds,
            rate_limit_reset=rate_info.reset_timestamp,
            retry_after_header=rate_info.retry_after,
        )
    if status == 403:
        raise GitHubUpstreamError(403, f"GitHub API forbidden: {resource}")

    raise GitHubUpstreamError(status)
