"""
Tests for application startup and shutdown.

``db.connect`` is replaced so startup runs against ``FakeDatabase``;
everything else (seeding, service wiring, client shutdown) is real.
"""

import pytest
from fastapi.testclient import TestClient

from personal_finance_api.app.core import db
from personal_finance_api.app.core.config import _DEFAULT_SEED_DIR, settings
from personal_finance_api.app.main import create_app
from personal_finance_api.app.seed import SeedingError
from tests.fakes import FakeDatabase


class StubClient:

    def __init__(self) -> None:
        self.closed = False

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def mongo(monkeypatch):
    client = StubClient()
    database = FakeDatabase()

    async def fake_connect(*args, **kwargs):
        return client, database

    monkeypatch.setattr(db, "connect", fake_connect)
    monkeypatch.setattr(settings, "seed_data_dir", _DEFAULT_SEED_DIR)
    monkeypatch.setattr(settings, "seed_on_startup", True)
    return client, database


class TestStartup:

    def test_startup_seeds_and_serves_store_data(self, mongo):
        client, database = mongo
        with TestClient(create_app()) as http:
            goals = http.get("/api/v1/goals").json()
            assert sorted(g["name"] for g in goals) == ["House Down Payment", "Tesla Model Y", "Trip to Japan"]
            jane = http.get("/api/v1/goals/user/62a3f587102e921da1253d32").json()
            assert len(jane) == 2
            login = http.post("/api/v1/auth/login", json={"email": "jane@example.com", "password": "janepassword"})
            assert login.status_code == 200
        assert client.closed

    def test_seeding_can_be_disabled(self, mongo, monkeypatch):
        client, database = mongo
        monkeypatch.setattr(settings, "seed_on_startup", False)
        with TestClient(create_app()) as http:
            assert http.get("/api/v1/goals").json() == []
        assert client.closed

    def test_seeding_failure_aborts_startup_and_closes_client(self, mongo, monkeypatch, tmp_path):
        client, database = mongo
        monkeypatch.setattr(settings, "seed_data_dir", str(tmp_path))
        app = create_app()
        with pytest.raises(SeedingError):
            with TestClient(app):
                pass
        assert client.closed
        assert app.state.services is None

    def test_injected_services_skip_the_database(self, mongo, registry):
        client, database = mongo
        with TestClient(create_app(services=registry)) as http:
            assert http.get("/api/v1/tags").json() == []
        assert database.collections == {}
