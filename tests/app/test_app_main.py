"""Unit tests for app.main — app creation, routing, health, demo, lifespan."""
from __future__ import annotations

import json

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient


@pytest.fixture
def app():
    """Import the actual app instance (no lifespan execution)."""
    from app.main import app as real_app
    return real_app


@pytest.fixture
def client(app):
    return TestClient(app, raise_server_exceptions=False)


@pytest.mark.unit
class TestAppCreation:

    def test_app_is_fastapi_instance(self, app):
        assert isinstance(app, FastAPI)

    def test_app_title(self, app):
        assert app.title == "FRA Atlas"

    def test_app_version(self, app):
        assert app.version == "0.1.0"

    def test_session_on_state(self, app):
        from atlas.session import AtlasSession
        assert isinstance(app.state.session, AtlasSession)


@pytest.mark.unit
class TestRouterRegistration:

    EXPECTED_PATHS = [
        "/api/layers",
        "/api/map/regions",
        "/api/map/focus/{region_name}",
        "/api/rules/land-use",
        "/api/rules/changes",
        "/api/claims",
        "/api/demo",
        "/health",
        "/",
    ]

    @pytest.mark.parametrize("path", EXPECTED_PATHS)
    def test_route_registered(self, app, path):
        paths = {getattr(r, "path", None) for r in app.routes}
        assert path in paths


@pytest.mark.unit
class TestEndpoints:

    def test_health(self, client):
        data = client.get("/health").json()
        assert data["status"] == "operational"
        assert data["system"] == "FRA Atlas"

    def test_demo_message(self, client):
        from app.config import settings
        assert client.get("/api/demo").json() == {"message": settings.demo_message}


@pytest.mark.unit
class TestCreateSession:

    def test_settings_drive_session(self, monkeypatch):
        from app.config import settings
        from app.main import create_session
        monkeypatch.setattr(settings, "basemap", "Imagery")
        monkeypatch.setattr(settings, "map_default_zoom", 4)
        monkeypatch.setattr(settings, "change_record_limit", 1)
        session = create_session()
        assert session.map_view.basemap.name == "Imagery"
        assert session.map_view.view.zoom == 4

        fc = {"type": "FeatureCollection", "features": [
            {"type": "Feature", "id": "A", "geometry": None, "properties": {"x": 1, "y": 1}},
        ]}
        a = session.upload(json.dumps(fc), "a.geojson")
        fc["features"][0]["properties"] = {"x": 2, "y": 2}
        b = session.upload(json.dumps(fc), "b.geojson")
        session.panel.select_primary(a.layer_id)
        session.panel.select_secondary(b.layer_id)
        assert session.panel.run_detect_changes().splitlines()[-1] == "  …and 1 more"


@pytest.mark.unit
class TestLifespan:

    def test_lifespan_closes_session(self):
        from app.main import lifespan
        from atlas.session import AtlasSession

        app = FastAPI(lifespan=lifespan)
        session = AtlasSession()
        app.state.session = session
        with TestClient(app):
            session.upload('{"type": "FeatureCollection", "features": []}', "a.geojson")
            assert len(session.store) == 1
        assert len(session.store) == 0

    def test_lifespan_creates_missing_session(self):
        from app.main import lifespan

        app = FastAPI(lifespan=lifespan)
        with TestClient(app):
            assert app.state.session is not None

    def test_restart_builds_fresh_session(self):
        from app.main import lifespan
        from app.routers import layers_router, map_router, rules_router

        app = FastAPI(lifespan=lifespan)
        app.include_router(layers_router)
        app.include_router(map_router)
        app.include_router(rules_router)
        with TestClient(app):
            first = app.state.session
        assert first.closed
        assert app.state.session is None

        with TestClient(app) as client:
            assert app.state.session is not first
            fc = {"type": "FeatureCollection", "features": [
                {"type": "Feature", "id": "A", "geometry": {"type": "Point", "coordinates": [79.0, 18.1]},
                 "properties": {"land_use": "Forest"}},
            ]}
            layer_id = client.post(
                "/api/layers/raw?filename=plots.geojson", content=json.dumps(fc),
            ).json()["id"]
            overlays = client.get("/api/map/overlays").json()["overlays"]
            assert [o["layer_id"] for o in overlays] == [layer_id]
            resp = client.put("/api/rules/selection", json={"primary_id": layer_id})
            assert resp.status_code == 200


@pytest.mark.unit
class TestServerEntry:

    def test_run_uses_server_settings(self, monkeypatch):
        import uvicorn

        from app.__main__ import run
        from app.config import settings

        calls = []
        monkeypatch.setattr(uvicorn, "run", lambda *a, **kw: calls.append((a, kw)))
        monkeypatch.setattr(settings, "host", "127.0.0.1")
        monkeypatch.setattr(settings, "port", 9123)
        monkeypatch.setattr(settings, "debug", True)
        run()
        (args, kwargs), = calls
        assert args == ("app.main:app",)
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 9123
        assert kwargs["reload"] is True
        assert kwargs["log_level"] == "debug"
