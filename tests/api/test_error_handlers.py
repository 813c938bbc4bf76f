"""Error Handlers — error envelope and request context in logs.

Tests cover:
    - Validation details name fields by their wire names
    - Malformed JSON bodies reported as such
    - Domain error logs carry method, path and the raw post id
    - Unhandled exceptions → 500 without internal details
"""

import logging
from uuid import uuid4

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from purehouse.api.error_handlers import register_error_handlers


async def test_validation_details_use_wire_field_names(client):
    res = await client.post("/api/posts", json={
        "author": "A", "content": "c", "coverImage": {"url": 42},
    })
    assert res.status_code == 400
    fields = {d["field"] for d in res.json()["error"]["details"]}
    assert fields == {"title", "coverImage.url"}


async def test_malformed_json_body_is_400(client):
    res = await client.post(
        "/api/posts",
        content=b'{"title": "T", ',
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["message"] == "Malformed JSON body"
    assert error["details"][0]["field"] == "body"


async def test_not_found_logged_with_request_context(client, caplog):
    missing = str(uuid4())
    with caplog.at_level(logging.WARNING, logger="purehouse.api.error_handlers"):
        res = await client.get(f"/api/posts/{missing}")
    assert res.status_code == 404
    record = next(r for r in caplog.records if r.name == "purehouse.api.error_handlers")
    assert record.levelno == logging.WARNING
    assert record.error_code == "RESOURCE_NOT_FOUND"
    assert record.method == "GET"
    assert record.post_id == missing


async def test_malformed_id_logged_with_raw_post_id(client, caplog):
    with caplog.at_level(logging.WARNING, logger="purehouse.api.error_handlers"):
        await client.delete("/api/posts/zzz")
    record = next(r for r in caplog.records if r.name == "purehouse.api.error_handlers")
    assert record.error_code == "INVALID_IDENTIFIER"
    assert record.post_id == "zzz"


async def test_unhandled_exception_hides_details():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret connection string")

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.get("/boom")
    assert res.status_code == 500
    assert res.json()["error"]["code"] == "INTERNAL_ERROR"
    assert "secret" not in res.text
