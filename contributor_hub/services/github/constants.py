"""Constants for GitHub service."""

API_VERSION = "2022-11-28"
ACCEPT_HEADER = "application/vnd.github+json"

# Statuses GitHub uses for rate limiting. 403 only counts when the
# rate limit headers say so; 429 always does.
RATE_LIMIT_STATUSES: frozenset[int] = frozenset({403, 429})

# Returned by the commits endpoint when the git repository has no commits
EMPTY_REPOSITORY_STATUS = 409
