"""
Thin GitHub REST client.

`GitHubClient.get` is the only way the rest of the package talks to GitHub.
It attaches the versioning headers, optionally authenticates, and turns every
failure into a `GitHubAPIError` subclass. It never retries: the first error
is raised to the caller.
"""

import logging
from typing import Any

import httpx

from contributor_hub.config import settings
from contributor_hub.services.github.constants import ACCEPT_HEADER, API_VERSION
from contributor_hub.services.github.exceptions import (
    GitHubNetworkError,
    GitHubUpstreamError,
)
from contributor_hub.services.github.helpers import RateLimitInfo, handle_error_response
from contributor_hub.services.github.http_client import get_github_client

logger = logging.getLogger(__name__)


class GitHubClient:
    """
    Read-only GitHub API access.

    Uses the shared HTTP client singleton for connection pooling. An empty or
    missing token is allowed: requests go out unauthenticated and are subject
    to GitHub's lower anonymous rate limit.
    """

    def __init__(
        self,
        token: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        self.token = token if token is not None else settings.github_token
        self.base_url = (base_url or settings.github_api_url).rstrip("/")
        self.timeout = timeout
        self._headers = {
            "Accept": ACCEPT_HEADER,
            "X-GitHub-Api-Version": API_VERSION,
        }
        if self.token:
            self._headers["Authorization"] = f"Bearer {self.token}"

    @property
    def authenticated(self) -> bool:
        return "Authorization" in self._headers

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """
        GET a GitHub API path and return the decoded JSON body.

        Args:
            path: API path, e.g. "/users/octocat"
            params: Optional query parameters

        Returns:
            Decoded JSON, or None for 204 No Content

        Raises:
            GitHubNetworkError: Timeout, transport failure or unreadable body
            GitHubAPIError: Classified non-success response (see helpers)
        """
        url = f"{self.base_url}{path}"
        request_kwargs: dict[str, Any] = {"headers": self._headers, "params": params}
        if self.timeout is not None:
            request_kwargs["timeout"] = self.timeout

        if not self.authenticated:
            logger.debug(f"Unauthenticated GitHub request: {path}")

        client = get_github_client()
        try:
            response = await client.get(url, **request_kwargs)
        except httpx.TimeoutException as e:
            raise GitHubNetworkError(f"GitHub request timed out: {path}") from e
        except httpx.RequestError as e:
            # Transport failures, undecodable bodies, redirect loops
            raise GitHubNetworkError(f"GitHub request failed: {path}: {e}") from e

        rate_info = RateLimitInfo(response)
        logger.debug(
            f"GET {path} params={params} -> {response.status_code} "
            f"(rate limit remaining: {rate_info.remaining})"
        )

        handle_error_response(response, path)

        if response.status_code == 204:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise GitHubUpstreamError(
                response.status_code, f"Malformed JSON from GitHub for {path}"
            ) from e
