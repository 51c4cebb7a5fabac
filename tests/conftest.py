"""Shared fixtures: one fresh SQLite database per test, and an HTTP client."""

import pytest
from fastapi.testclient import TestClient

from football_api.app.core.config import settings
from football_api.app.core.db import init_db
from football_api.app.main import app


@pytest.fixture(autouse=True)
def database(tmp_path, monkeypatch):
    """Point the application at an empty database file under tmp_path."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "football.db"))
    init_db()
    yield


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def create_equipe(client):
    """Create a team through the API and return its JSON."""

    def _create(nom, acronyme, budget=1000000, joueurs=None):
        payload = {"nom": nom, "acronyme": acronyme, "budget": budget}
        if joueurs is not None:
            payload["joueurs"] = joueurs
        response = client.post("/api/equipes", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_joueur(client):
    """Create a player through the API and return its JSON."""

    def _create(nom, position, equipe_id=None):
        payload = {"nom": nom, "position": position}
        if equipe_id is not None:
            payload["equipeId"] = equipe_id
        response = client.post("/api/joueurs", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
