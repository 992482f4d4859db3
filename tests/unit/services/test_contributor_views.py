"""Unit tests for contributor views: search, ranking and windows."""

from __future__ import annotations

import pytest

from contributor_hub.services.contributors.types import Contributor, ContributorDetail
from contributor_hub.services.contributors.views import (
    NEW_CONTRIBUTORS_LIMIT,
    RECENT_CONTRIBUTORS_LIMIT,
    TOP_CONTRIBUTORS_LIMIT,
    filter_by_name,
    most_recent,
    newest,
    top_by_contributions,
)


def _contributor(user_id: int, login: str | None = None, contributions: int = 1) -> Contributor:
    login = login or f"user{user_id}"
    return Contributor(
        id=user_id,
        login=login,
        avatar_url=f"https://avatars.githubusercontent.com/u/{user_id}",
        profile_url=f"https://github.com/{login}",
        contributions=contributions,
    )


@pytest.fixture
def roster() -> list[Contributor]:
    return [
        _contributor(1, "alice", 5),
        _contributor(2, "Bob", 50),
        _contributor(3, "carol", 5),
        _contributor(4, "dave", 100),
        _contributor(5, "eve", 50),
    ]


# ═══════════════════════════════════════════════════════════════════════════
# filter_by_name
# ═══════════════════════════════════════════════════════════════════════════


class TestFilterByName:
    """Tests for case-insensitive search."""

    def test_case_insensitive_substring(self):
        ada = _contributor(1, "Ada")
        bob = _contributor(2, "bob")

        assert filter_by_name([ada, bob], "ad") == [ada]

    def test_empty_term_returns_input_unchanged(self, roster):
        result = filter_by_name(roster, "")

        assert result == roster
        assert result is not roster

    def test_blank_term_returns_input_unchanged(self, roster):
        assert filter_by_name(roster, "   ") == roster

    def test_preserves_relative_order(self, roster):
        assert [c.login for c in filter_by_name(roster, "e")] == ["alice", "dave", "eve"]

    def test_no_match_returns_empty(self, roster):
        assert filter_by_name(roster, "zzz") == []

    def test_empty_input(self):
        assert filter_by_name([], "a") == []

    def test_matches_name_when_available(self):
        detail = ContributorDetail(
            id=9,
            login="octocat",
            avatar_url="a",
            profile_url="p",
            name="Mona Lisa",
        )
        nameless = ContributorDetail(id=10, login="hubot", avatar_url="a", profile_url="p")

        assert filter_by_name([detail, nameless], "LISA") == [detail]


# ═══════════════════════════════════════════════════════════════════════════
# top_by_contributions
# ═══════════════════════════════════════════════════════════════════════════


class TestTopByContributions:
    """Tests for ranking by contribution count."""

    def test_sorted_descending_with_stable_ties(self, roster):
        result = top_by_contributions(roster, 5)

        assert [c.login for c in result] == ["dave", "Bob", "eve", "alice", "carol"]
        counts = [c.contributions for c in result]
        assert counts == sorted(counts, reverse=True)

    def test_length_is_min_of_n_and_input(self, roster):
        assert len(top_by_contributions(roster, 2)) == 2
        assert len(top_by_contributions(roster, 99)) == len(roster)

    def test_does_not_assume_presorted_input(self):
        unsorted = [_contributor(1, contributions=1), _contributor(2, contributions=9)]

        assert top_by_contributions(unsorted, 1)[0].id == 2

    def test_does_not_mutate_input(self, roster):
        before = list(roster)
        top_by_contributions(roster, 3)

        assert roster == before

    @pytest.mark.parametrize("n", [0, -1])
    def test_non_positive_n_returns_empty(self, roster, n):
        assert top_by_contributions(roster, n) == []

    def test_empty_input(self):
        assert top_by_contributions([], 10) == []


# ═══════════════════════════════════════════════════════════════════════════
# most_recent / newest
# ═══════════════════════════════════════════════════════════════════════════


class TestMostRecent:
    """Tests for the first-n window."""

    def test_first_n_in_order(self, roster):
        assert [c.id for c in most_recent(roster, 3)] == [1, 2, 3]

    def test_zero_returns_empty(self, roster):
        assert most_recent(roster, 0) == []

    def test_n_larger_than_input_returns_all(self, roster):
        assert most_recent(roster, 50) == roster

    def test_empty_input(self):
        assert most_recent([], 5) == []


class TestNewest:
    """Tests for the last-n-reversed window."""

    def test_last_n_reversed(self, roster):
        assert [c.id for c in newest(roster, 2)] == [5, 4]

    @pytest.mark.parametrize("n", [1, 2, 3, 5, 8])
    def test_reverse_of_newest_is_tail(self, roster, n):
        assert list(reversed(newest(roster, n))) == roster[-n:]

    def test_zero_returns_empty(self, roster):
        # Guards against the roster[-0:] slice returning everything
        assert newest(roster, 0) == []

    def test_n_larger_than_input_returns_all_reversed(self, roster):
        assert newest(roster, 20) == list(reversed(roster))

    def test_empty_input(self):
        assert newest([], 3) == []


def test_default_window_sizes():
    assert TOP_CONTRIBUTORS_LIMIT == 10
    assert RECENT_CONTRIBUTORS_LIMIT == 20
    assert NEW_CONTRIBUTORS_LIMIT == 20
