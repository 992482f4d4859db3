"""
Contributor data package.

Usage: `from contributor_hub.services.contributors import ContributorRepository, top_by_contributions`

Module structure:
- repository.py: ContributorRepository (roster, profile, commits)
- profile.py: Concurrent profile loading and commit summaries
- views.py: Filtering, ranking and windowing over a roster
- normalize.py: GitHub payload -> record conversion
- types.py: Record types
"""

from contributor_hub.services.contributors.profile import (
    load_contributor_profile,
    summarize_commits,
)
from contributor_hub.services.contributors.repository import ContributorRepository
from contributor_hub.services.contributors.types import (
    Commit,
    CommitActivity,
    Contributor,
    ContributorDetail,
    ContributorIdentity,
    ContributorProfile,
)
from contributor_hub.services.contributors.views import (
    NEW_CONTRIBUTORS_LIMIT,
    RECENT_CONTRIBUTORS_LIMIT,
    TOP_CONTRIBUTORS_LIMIT,
    filter_by_name,
    most_recent,
    newest,
    top_by_contributions,
)

__all__ = [
    # Repository
    "ContributorRepository",
    "load_contributor_profile",
    "summarize_commits",
    # Views
    "filter_by_name",
    "most_recent",
    "newest",
    "top_by_contributions",
    "NEW_CONTRIBUTORS_LIMIT",
    "RECENT_CONTRIBUTORS_LIMIT",
    "TOP_CONTRIBUTORS_LIMIT",
    # Types
    "Commit",
    "CommitActivity",
    "Contributor",
    "ContributorDetail",
    "ContributorIdentity",
    "ContributorProfile",
]
