import pytest
from fastapi.testclient import TestClient

from personal_finance_api.app.main import create_app
from tests.fakes import FakeDatabase, make_registry


@pytest.fixture
def database() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def registry():
    return make_registry()


@pytest.fixture
def client(registry) -> TestClient:
    return TestClient(create_app(services=registry))
