# File: tests/test_app.py

from fastapi import APIRouter
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text

from authportal.core.config import Settings
from authportal.main import create_application


def test_health_endpoint(client):
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_form_page_served(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert 'type="email"' in resp.text
    assert 'type="password"' in resp.text
    assert 'data-endpoint="/api/auth/login"' in resp.text


def test_form_script_served(client):
    resp = client.get("/static/login.js")

    assert resp.status_code == 200
    assert "Request failed" in resp.text


def test_application_uses_given_router():
    router = APIRouter()

    @router.get("/ping")
    def ping():
        return {"pong": True}

    client = TestClient(create_application(router, Settings(database_url="sqlite://")))

    assert client.get("/api/ping").json() == {"pong": True}
    assert client.post("/api/auth/login", json={"email": "a@b.com", "password": "x"}).status_code == 404


def _stored_hashes(database_url):
    engine = create_engine(database_url)
    try:
        with engine.connect() as conn:
            return conn.execute(text("SELECT email, password_hash FROM users")).all()
    finally:
        engine.dispose()


def test_registration_writes_to_configured_database(tmp_path):
    database_url = f"sqlite:///{tmp_path / 'custom.db'}"
    app = create_application(settings=Settings(database_url=database_url))

    # entering the client runs startup, which creates the tables
    with TestClient(app) as client:
        resp = client.post("/api/auth/login", json={"email": "a@b.com", "password": "secret123"})

    assert resp.status_code == 201
    assert (tmp_path / "custom.db").exists()
    rows = _stored_hashes(database_url)
    assert [row.email for row in rows] == ["a@b.com"]


def test_registration_uses_configured_cost_factor(tmp_path):
    database_url = f"sqlite:///{tmp_path / 'rounds.db'}"
    app = create_application(settings=Settings(database_url=database_url, bcrypt_rounds=11))

    with TestClient(app) as client:
        resp = client.post("/api/auth/login", json={"email": "a@b.com", "password": "secret123"})

    assert resp.status_code == 201
    (row,) = _stored_hashes(database_url)
    assert row.password_hash.startswith("$2b$11$")


def test_application_state_carries_settings():
    settings = Settings(database_url="sqlite://", bcrypt_rounds=12)
    app = create_application(settings=settings)

    assert app.state.settings is settings
    assert str(app.state.engine.url) == "sqlite://"
