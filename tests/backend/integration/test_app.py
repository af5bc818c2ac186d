import pytest
from httpx import ASGITransport, AsyncClient

from postboard.main import create_app


pytestmark = pytest.mark.asyncio


async def test_root_and_health(client):
    root = await client.get("/")
    assert root.status_code == 200
    assert root.json() == {"message": "API is running!"}

    health = await client.get("/healthz")
    assert health.json() == {"ok": True}


async def test_security_headers_are_set(client):
    resp = await client.get("/posts")
    assert resp.headers["x-content-type-options"] == "nosniff"
    assert resp.headers["x-frame-options"] == "SAMEORIGIN"
    assert resp.headers["referrer-policy"] == "no-referrer"
    assert "max-age" in resp.headers["strict-transport-security"]
    assert "default-src 'self'" in resp.headers["content-security-policy"]


async def test_security_headers_on_errors(client):
    resp = await client.get("/accounts/profile")
    assert resp.status_code == 401
    assert resp.headers["x-content-type-options"] == "nosniff"


async def test_cors_preflight(client):
    resp = await client.options(
        "/posts",
        headers={
            "Origin": "http://frontend.test",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"


async def test_rate_limit_returns_429(settings_factory):
    app = create_app(settings_factory(rate_limit="2 per minute", rate_limit_enabled=True))
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        assert (await client.get("/healthz")).status_code == 200
        assert (await client.get("/healthz")).status_code == 200
        limited = await client.get("/healthz")
    assert limited.status_code == 429
    assert limited.json()["detail"]["code"] == "RATE_LIMITED"


async def test_app_state_carries_settings_and_tokens(app, settings):
    assert app.state.settings is settings
    assert app.state.tokens.ttl.total_seconds() == settings.access_token_expire_hours * 3600


async def test_unexpected_error_uses_json_error_body(app):
    @app.get("/boom")
    def boom():
        raise RuntimeError("kaboom")

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        resp = await client.get("/boom")
    assert resp.status_code == 500
    assert resp.json() == {"detail": {"code": "INTERNAL_ERROR", "message": "kaboom"}}
