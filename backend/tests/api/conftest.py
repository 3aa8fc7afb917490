"""API test fixtures: httpx client over the ASGI app with the pool dependency overridden.

Invariants:
    - get_db_manager resolves to the per-test SQLite pool
    - make_user / make_computer / make_log POST through the API and return the body
"""

import pytest
from httpx import ASGITransport, AsyncClient

from inventory.api.dependencies import get_db_manager
from inventory.main import app
from tests.api.payloads import computer_payload, log_payload, user_payload


async def _post(client, path, payload) -> dict:
    res = await client.post(path, json=payload)
    assert res.status_code == 201, res.text
    return res.json()


@pytest.fixture
async def client(db_manager):
    """FastAPI test client bound to the per-test database."""
    app.dependency_overrides[get_db_manager] = lambda: db_manager
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(client):
    async def _make(**overrides):
        return await _post(client, "/api/users", user_payload(**overrides))
    return _make


@pytest.fixture
def make_computer(client):
    async def _make(**overrides):
        return await _post(client, "/api/computers", computer_payload(**overrides))
    return _make


@pytest.fixture
def make_log(client):
    async def _make(computer_id, **overrides):
        return await _post(
            client, "/api/maintenance", log_payload(computer_id, **overrides),
        )
    return _make
