"""Tests for the claims dashboard helpers."""

import pytest

from atlas.claims import (
    CLAIMS,
    FOCUS_STATES,
    chart_rows,
    filter_claims,
    stats_by_state,
    status_totals,
)


@pytest.mark.unit
class TestFilterClaims:

    def test_all(self):
        assert len(filter_claims()) == 10

    def test_by_state(self):
        rows = filter_claims(state="Odisha")
        assert {c.id for c in rows} == {"OD-050", "OD-099", "OD-120"}

    def test_search_case_insensitive(self):
        assert [c.id for c in filter_claims(search="asha")] == ["MP-001"]

    def test_search_matches_status(self):
        assert len(filter_claims(search="rejected")) == 3

    def test_state_and_search(self):
        rows = filter_claims(state="Telangana", search="pending")
        assert [c.id for c in rows] == ["TG-220"]

    def test_no_match(self):
        assert filter_claims(search="zzz") == []


@pytest.mark.unit
class TestClaimStats:

    def test_status_totals(self):
        assert status_totals(CLAIMS) == {"Pending": 4, "Claimed": 3, "Rejected": 3}

    def test_stats_by_state_has_every_state(self):
        stats = stats_by_state([])
        assert set(stats) == set(FOCUS_STATES)
        assert stats["Tripura"] == {"Pending": 0, "Claimed": 0, "Rejected": 0}

    def test_stats_by_state_counts(self):
        stats = stats_by_state(CLAIMS)
        assert stats["Madhya Pradesh"] == {"Pending": 1, "Claimed": 1, "Rejected": 1}

    def test_chart_rows_order(self):
        rows = chart_rows(CLAIMS)
        assert [r["state"] for r in rows] == list(FOCUS_STATES)
        assert rows[2] == {"state": "Odisha", "Pending": 1, "Claimed": 1, "Rejected": 1}
