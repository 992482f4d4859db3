"""
Derived views over an already-fetched contributor list.

Pure functions: no I/O, no mutation of the input, always a new list.
Degenerate inputs (empty list, n <= 0, n larger than the list) give
empty or whole results instead of errors.
"""

from collections.abc import Sequence
from typing import TypeVar

from contributor_hub.services.contributors.types import Contributor, ContributorIdentity

# Tab sizes on the contributors page
TOP_CONTRIBUTORS_LIMIT = 10
RECENT_CONTRIBUTORS_LIMIT = 20
NEW_CONTRIBUTORS_LIMIT = 20

IdentityT = TypeVar("IdentityT", bound=ContributorIdentity)
ContributorT = TypeVar("ContributorT", bound=Contributor)


def filter_by_name(contributors: Sequence[IdentityT], term: str) -> list[IdentityT]:
    """
    Case-insensitive substring search over login, and name when the record has one.

    An empty or blank term returns every contributor in the original order.
    """
    needle = term.strip().casefold()
    if not needle:
        return list(contributors)

    matches: list[IdentityT] = []
    for contributor in contributors:
        name = getattr(contributor, "name", None)
        if needle in contributor.login.casefold() or (name and needle in name.casefold()):
            matches.append(contributor)
    return matches


def top_by_contributions(contributors: Sequence[ContributorT], n: int) -> list[ContributorT]:
    """Highest `contributions` first; equal counts keep their input order."""
    if n <= 0:
        return []
    # sorted() is stable, so ties stay in roster order
    ranked = sorted(contributors, key=lambda c: c.contributions, reverse=True)
    return ranked[:n]


def most_recent(contributors: Sequence[IdentityT], n: int) -> list[IdentityT]:
    """First `n` contributors in roster order."""
    if n <= 0:
        return []
    return list(contributors[:n])


def newest(contributors: Sequence[IdentityT], n: int) -> list[IdentityT]:
    """Last `n` contributors, last one first."""
    if n <= 0:
        return []
    return list(reversed(contributors[-n:]))
