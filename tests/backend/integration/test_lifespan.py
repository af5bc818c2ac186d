"""
Full application startup: lifespan bootstrap, then requests served from
the registered pool. Runs through starlette's TestClient, which drives
the lifespan events.
"""
import pytest
from fastapi.testclient import TestClient

from postboard.core.bootstrap import BootstrapError
from postboard.core.seed_data import SEED_ACCOUNTS, SEED_POSTS
from postboard.main import create_app


@pytest.fixture
def file_settings(tmp_path, settings_factory):
    return settings_factory(database_url=f"sqlite://{tmp_path / 'postboard.sqlite3'}")


def test_startup_bootstraps_and_serves_seed_posts(file_settings):
    with TestClient(create_app(file_settings)) as client:
        resp = client.get("/posts")
    assert resp.status_code == 200
    assert len(resp.json()["data"]) == len(SEED_POSTS)


def test_seed_account_can_log_in_and_post(file_settings):
    seed = SEED_ACCOUNTS[0]
    with TestClient(create_app(file_settings)) as client:
        login = client.post("/accounts/login", json={"email": seed["email"], "password": seed["password"]})
        assert login.status_code == 200
        headers = {"Authorization": f"Bearer {login.json()['data']['accessToken']}"}

        created = client.post("/posts", headers=headers, json={"title": "t", "content": "c"})
        assert created.status_code == 201
        assert len(client.get("/posts").json()["data"]) == len(SEED_POSTS) + 1


def test_restart_keeps_data_without_reseeding(file_settings):
    with TestClient(create_app(file_settings)) as client:
        client.post(
            "/accounts/register",
            json={"username": "a", "email": "a@x.com", "password": "p1"},
        )
    with TestClient(create_app(file_settings)) as client:
        login = client.post("/accounts/login", json={"email": "a@x.com", "password": "p1"})
        posts = client.get("/posts")
    assert login.status_code == 200
    assert len(posts.json()["data"]) == len(SEED_POSTS)


def test_startup_fails_when_bootstrap_fails(tmp_path, settings_factory):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    app = create_app(settings_factory(database_url=f"sqlite://{blocker / 'postboard.sqlite3'}"))

    with pytest.raises(BootstrapError):
        with TestClient(app):
            pass


def test_pool_is_released_when_serving_ends_with_an_error(file_settings):
    with pytest.raises(RuntimeError, match="shutdown"):
        with TestClient(create_app(file_settings)) as client:
            assert client.get("/healthz").status_code == 200
            raise RuntimeError("shutdown")

    with TestClient(create_app(file_settings)) as client:
        resp = client.get("/posts")
    assert resp.status_code == 200
    assert len(resp.json()["data"]) == len(SEED_POSTS)
