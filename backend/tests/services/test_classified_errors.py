"""Classified error mode — cause-specific statuses behind CLASSIFIED_ERRORS.

Invariants:
    - Messages stay the operation's; only the status follows the cause
    - Empty update stays 400 in both modes
"""

import pytest

from tienda.config import Settings, get_settings
from tienda.main import app


@pytest.fixture
async def classified_client(client):
    app.dependency_overrides[get_settings] = lambda: Settings(
        _env_file=None,
        database_url="sqlite+aiosqlite:///:memory:",
        classified_errors=True,
    )
    yield client


async def test_update_unknown_id_is_404(classified_client):
    res = await classified_client.put("/productos/999", json={"precio": 1.0})
    assert res.status_code == 404
    assert res.json() == "Failed to update producto"


async def test_missing_table_is_500_not_unavailable(classified_client, drop_tables):
    res = await classified_client.get("/clientes")
    assert res.status_code == 500
    assert res.json() == "No clientes found"


async def test_empty_update_still_400(classified_client, seed_cliente):
    res = await classified_client.put(f"/clientes/{seed_cliente.id}", json={})
    assert res.status_code == 400


async def test_success_paths_unchanged(classified_client):
    res = await classified_client.post(
        "/clientes", json={"nombre": "B", "telefono": "1", "presupuesto": 2.0},
    )
    assert res.status_code == 200
