import os

os.environ["ENV"] = "test"
os.environ.pop("REDIS_URL", None)

import fakeredis
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.store import get_redis


@pytest.fixture
def fake_redis():
    # decode_responses matches the production client so members come back as str
    server = fakeredis.FakeServer()
    client = fakeredis.FakeRedis(server=server, decode_responses=True)
    yield client
    client.flushall()


@pytest.fixture
def client(fake_redis):
    app.dependency_overrides[get_redis] = lambda: fake_redis
    yield TestClient(app)
    app.dependency_overrides.pop(get_redis, None)


@pytest.fixture
def unconfigured_client():
    """Client whose store dependency behaves as if REDIS_URL were unset."""
    app.dependency_overrides[get_redis] = lambda: None
    yield TestClient(app)
    app.dependency_overrides.pop(get_redis, None)


@pytest.fixture
def submit(client):
    """Post a result and assert it was accepted."""
    def _submit(**body):
        response = client.post("/api/quiz/submit", json=body)
        assert response.status_code == 200, response.text
        return response
    return _submit
