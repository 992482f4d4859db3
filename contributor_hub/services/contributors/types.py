"""Data types for contributor records.

Contributor, ContributorDetail, Commit and CommitActivity are frozen snapshots
of what GitHub returned. ContributorProfile is a mutable container assembled
by the profile loader around those snapshots.
"""

from dataclasses import dataclass, field

from contributor_hub.services.github.exceptions import GitHubAPIError


@dataclass(frozen=True)
class ContributorIdentity:
    """Fields shared by roster entries and full profiles."""

    id: int
    login: str
    avatar_url: str
    profile_url: str  # html_url on GitHub

    @property
    def initials(self) -> str:
        """Avatar fallback text."""
        return self.login[:2].upper()


@dataclass(frozen=True)
class Contributor(ContributorIdentity):
    """One entry of the repository contributor roster."""

    contributions: int  # Number of commits to the repository


@dataclass(frozen=True)
class ContributorDetail(ContributorIdentity):
    """Extended GitHub profile of a single contributor.

    Optional attributes are None when GitHub has no value; they are never
    defaulted to an empty string.
    """

    name: str | None = None
    bio: str | None = None
    company: str | None = None
    location: str | None = None
    email: str | None = None
    blog_url: str | None = None
    twitter_handle: str | None = None
    public_repo_count: int = 0
    follower_count: int = 0
    following_count: int = 0
    created_at: str | None = None  # ISO 8601

    @property
    def display_name(self) -> str:
        return self.name or self.login

    @property
    def blog_href(self) -> str | None:
        """Blog URL with a scheme, since users often enter bare domains."""
        if not self.blog_url:
            return None
        if self.blog_url.startswith(("http://", "https://")):
            return self.blog_url
        return f"https://{self.blog_url}"

    @property
    def twitter_url(self) -> str | None:
        if not self.twitter_handle:
            return None
        return f"https://twitter.com/{self.twitter_handle}"


@dataclass(frozen=True)
class Commit:
    """One commit attributed to a contributor."""

    sha: str
    message: str  # Full message, possibly multi-line
    author_date: str  # ISO 8601
    html_url: str

    @property
    def summary(self) -> str:
        """First line of the commit message."""
        return self.message.split("\n", 1)[0].strip()

    @property
    def short_sha(self) -> str:
        return self.sha[:7]


@dataclass(frozen=True)
class CommitActivity:
    """Summary of a reverse-chronological commit list."""

    total_commits: int
    latest_commit_date: str | None  # ISO 8601 date string
    earliest_commit_date: str | None  # ISO 8601 date string


@dataclass
class ContributorProfile:
    """Detail and commit history loaded together for one contributor.

    Each half is set on its own success. A failed half is None and its error
    is recorded under "detail" or "commits".
    """

    login: str
    detail: ContributorDetail | None = None
    commits: list[Commit] | None = None
    errors: dict[str, GitHubAPIError] = field(default_factory=dict)

    @property
    def is_complete(self) -> bool:
        return not self.errors
