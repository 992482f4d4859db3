"""
GitHub service package.

Usage: `from contributor_hub.services.github import GitHubClient, GitHubAPIError`

Module structure:
- client.py: GitHubClient, the single GET entry point
- http_client.py: Shared httpx.AsyncClient lifecycle
- helpers.py: Rate limit parsing and error classification
- exceptions.py: Typed exceptions
- constants.py: API constants
"""

from contributor_hub.services.github.client import GitHubClient
from contributor_hub.services.github.exceptions import (
    ContributorNotFound,
    GitHubAPIError,
    GitHubNetworkError,
    GitHubNotFound,
    GitHubRateLimited,
    GitHubUnauthorized,
    GitHubUpstreamError,
    PaginationLimitExceeded,
)
from contributor_hub.services.github.helpers import RateLimitInfo, handle_error_response
from contributor_hub.services.github.http_client import close_github_client, get_github_client

__all__ = [
    # Client
    "GitHubClient",
    # HTTP client lifecycle
    "close_github_client",
    "get_github_client",
    # Utilities
    "handle_error_response",
    "RateLimitInfo",
    # Exceptions
    "ContributorNotFound",
    "GitHubAPIError",
    "GitHubNetworkError",
    "GitHubNotFound",
    "GitHubRateLimited",
    "GitHubUnauthorized",
    "GitHubUpstreamError",
    "PaginationLimitExceeded",
]
