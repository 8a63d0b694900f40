"""Pytest fixtures: every test gets its own app and catalog store."""

from __future__ import annotations

import pytest

from catalog_api.server import create_app
from catalog_api.store import CatalogStore

API_KEY = "test-secret"


@pytest.fixture(autouse=True)
def _no_env_overrides(monkeypatch):
    monkeypatch.delenv("CATALOG_API_KEY", raising=False)
    monkeypatch.delenv("CATALOG_API_KEY_HEADER", raising=False)


@pytest.fixture
def store():
    return CatalogStore()


@pytest.fixture
def app(store):
    app = create_app({"TESTING": True, "API_KEY": API_KEY}, store=store)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth():
    return {"X-API-Key": API_KEY}


@pytest.fixture
def make_client():
    """Build a client over a caller-supplied store."""

    def _make(store):
        return create_app({"TESTING": True, "API_KEY": API_KEY}, store=store).test_client()

    return _make
