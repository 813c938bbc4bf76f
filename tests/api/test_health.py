"""Health Check — database ping."""

import purehouse.infrastructure.database as db_module


async def test_health_ok_when_database_answers(client):
    res = await client.get("/api/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


async def test_health_reports_error_without_database(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/api/health")
    assert res.status_code == 200
    assert res.json()["status"] == "error"
