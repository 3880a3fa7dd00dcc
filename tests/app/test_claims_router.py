"""Unit tests for the claims dashboard router."""
from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.routers.claims import router


def _make_app():
    app = FastAPI()
    app.include_router(router)
    return app


@pytest.mark.unit
class TestClaimsRouter:

    def test_all_claims(self):
        data = TestClient(_make_app()).get("/api/claims").json()
        assert data["count"] == 10
        assert data["totals"] == {"Pending": 4, "Claimed": 3, "Rejected": 3}
        assert len(data["chart"]) == 4

    def test_filtered(self):
        data = TestClient(_make_app()).get(
            "/api/claims", params={"state": "Tripura", "search": "rima"},
        ).json()
        assert [c["id"] for c in data["claims"]] == ["TR-111"]
        assert data["claims"][0]["area_ha"] == 1.2

    def test_states(self):
        data = TestClient(_make_app()).get("/api/claims/states").json()
        assert data["states"][0] == "All"
        assert len(data["states"]) == 5
