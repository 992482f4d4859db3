"""Exceptions for GitHub service."""


class GitHubAPIError(Exception):
    """Error from GitHub API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        rate_limit_reset: int | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.rate_limit_reset = rate_limit_reset  # Unix timestamp when rate limit resets
        super().__init__(message)

    @property
    def is_transient(self) -> bool:
        """Whether retrying later might succeed (rate limits, network failures)."""
        return False


class GitHubNotFound(GitHubAPIError):
    """Requested resource does not exist (404)."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, 404)


class ContributorNotFound(GitHubNotFound):
    """No GitHub user exists for the requested login."""

    def __init__(self, login: str):
        self.login = login
        super().__init__(f"Contributor not found: {login}")


class GitHubUnauthorized(GitHubAPIError):
    """Token was rejected (401)."""

    def __init__(self, message: str = "Invalid or expired GitHub token"):
        super().__init__(message, 401)


class GitHubRateLimited(GitHubAPIError):
    """Primary or secondary rate limit hit (403/429).

    `retry_after` comes from the Retry-After header (seconds),
    `rate_limit_reset` from X-RateLimit-Reset (unix timestamp).
    Either may be None when GitHub did not send it. `retry_after_header`
    keeps the raw Retry-After value, which may be an HTTP date.
    """

    def __init__(
        self,
        status_code: int,
        retry_after: int | None = None,
        rate_limit_reset: int | None = None,
        retry_after_header: str | None = None,
    ):
        self.retry_after = retry_after
        self.retry_after_header = retry_after_header
        super().__init__(
            "GitHub API rate limit exceeded",
            status_code,
            rate_limit_reset=rate_limit_reset,
        )

    @property
    def is_transient(self) -> bool:
        return True


class GitHubUpstreamError(GitHubAPIError):
    """Any other non-success response, including malformed bodies."""

    def __init__(self, status_code: int, message: str | None = None):
        super().__init__(message or f"GitHub API error: {status_code}", status_code)


class GitHubNetworkError(GitHubAPIError):
    """Request never produced a response (timeout, connection reset, DNS)."""

    @property
    def is_transient(self) -> bool:
        return True


class PaginationLimitExceeded(GitHubAPIError):
    """Every page up to the configured maximum was full.

    Raised instead of returning a possibly truncated roster.
    """

    def __init__(self, max_pages: int, page_size: int):
        self.max_pages = max_pages
        self.page_size = page_size
        super().__init__(
            f"Contributor list did not end within {max_pages} pages "
            f"of {page_size} items"
        )
