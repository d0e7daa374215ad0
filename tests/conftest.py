"""Shared fixtures for the portal test-suite."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ["SECRET_KEY"] = "test-secret"
os.environ["PASSWORD_HASH_ROUNDS"] = "1000"
os.environ["APP_TIMEZONE"] = "UTC+7"
os.environ["SEED_SAMPLE_DATA"] = "true"

from portal.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from portal.infrastructure.seed import seed_sample_data  # noqa: E402
from portal.infrastructure.store import EntityStore  # noqa: E402

SAMPLE_USERNAME = "budisantoso"
SAMPLE_PASSWORD = "password123"


@pytest.fixture()
def store() -> EntityStore:
    """Return an empty store."""

    return EntityStore()


@pytest.fixture()
def seeded_store() -> EntityStore:
    """Return a store holding the sample dataset."""

    seeded = EntityStore()
    seed_sample_data(seeded)
    return seeded


@pytest.fixture()
def client(seeded_store: EntityStore):
    """Return a test client bound to a fresh application over ``seeded_store``."""

    from fastapi.testclient import TestClient

    from portal.main import create_app

    app = create_app(store=seeded_store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def login(client):
    """Return a helper that logs in and builds the Authorization header."""

    def _login(username: str = SAMPLE_USERNAME, password: str = SAMPLE_PASSWORD) -> dict[str, str]:
        response = client.post(
            "/api/auth/login", json={"username": username, "password": password}
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _login


@pytest.fixture()
def auth_headers(login) -> dict[str, str]:
    return login()
