"""
Tests for the application factory.
"""
from fastapi import FastAPI
from fastapi.testclient import TestClient

from credcore.accounts import InMemoryUserDirectory
from credcore.factory import configure_app, create_app


def _paths(app):
    return set(app.openapi()["paths"])


def test_create_app_registers_routes(settings):
    app = create_app(settings=settings)
    assert {"/health", "/auth/register", "/auth/login", "/me"} <= _paths(app)
    assert app.title == settings.APP_NAME
    assert app.state.settings is settings


def test_create_app_creates_fresh_directory_per_app(settings):
    first = create_app(settings=settings)
    second = create_app(settings=settings)
    assert isinstance(first.state.directory, InMemoryUserDirectory)
    assert first.state.directory is not second.state.directory


def test_create_app_uses_injected_directory(settings, directory):
    app = create_app(settings=settings, directory=directory)
    assert app.state.directory is directory
    with TestClient(app) as client:
        client.post("/auth/register", json={"email": "a@x.com", "password": "pw"})
    assert directory.find_by_email("a@x.com") is not None


def test_configure_existing_app(settings, directory):
    app = FastAPI()
    configure_app(app, settings, directory)
    assert app.debug is True
    resp = TestClient(app).get("/health")
    assert resp.json() == {"ok": True}


def test_create_app_from_environment(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("HEALTH_PATH", "/healthz")
    app = create_app()
    assert "/healthz" in _paths(app)
    assert app.state.settings.uses_dev_secret is True


def test_lifespan_runs(settings):
    app = create_app(settings=settings)
    with TestClient(app) as client:
        assert client.get("/health").status_code == 200


def test_main_serves_app_with_uvicorn(monkeypatch):
    from credcore import main

    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kw: calls.append((app, kw)))
    main.run()
    assert calls == [(main.app, {"host": main.settings.HOST, "port": main.settings.PORT})]
