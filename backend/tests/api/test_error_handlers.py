"""Error handlers - typed errors, validation errors and the catch-all.

Invariants:
    - BizTimeError keeps its own status and envelope
    - Unhandled exceptions become a generic 500 without internal details
"""

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from biztime.api.error_handlers import register_error_handlers
from biztime.core.errors import DatabaseError, ResourceNotFoundError


def _app() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/missing")
    async def missing():
        raise ResourceNotFoundError("Company", "gone")

    @app.get("/db")
    async def db_down():
        raise DatabaseError("Connection or operational error", "execute")

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret connection string")

    @app.get("/items/{item_id}")
    async def item(item_id: int):
        return {"id": item_id}

    return app


async def _get(path: str):
    transport = ASGITransport(app=_app(), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        return await c.get(path)


async def test_typed_error_keeps_status_and_envelope():
    res = await _get("/missing")
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "Company 'gone' not found"


async def test_infrastructure_error_maps_to_503():
    res = await _get("/db")
    assert res.status_code == 503
    assert res.json()["error"]["code"] == "DATABASE_ERROR"


async def test_unhandled_error_is_generic_500():
    res = await _get("/boom")
    assert res.status_code == 500
    assert res.json()["error"]["code"] == "INTERNAL_ERROR"
    assert "secret" not in res.text


async def test_validation_error_lists_fields():
    res = await _get("/items/not-a-number")
    assert res.status_code == 400
    details = res.json()["error"]["details"]
    assert details[0]["field"] == "path.item_id"
