from fastapi.testclient import TestClient


def test_root_and_health(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.text == "Server is running"
    assert client.get("/health").json() == {"ok": True}


def test_store_opened_and_closed_by_lifespan(app, store):
    assert store.initialised is False
    with TestClient(app) as c:
        assert store.initialised is True
        c.get("/health")
    assert store.closed is True


def test_rate_limit_disabled_in_tests(client):
    info = client.get("/health/rate-limit").json()
    assert info["enabled"] is False


def test_unknown_route_has_message_body(client):
    r = client.get("/does-not-exist")
    assert r.status_code == 404
    assert r.json() == {"message": "Not Found"}


def test_security_headers(client):
    r = client.get("/health")
    assert r.headers["X-Content-Type-Options"] == "nosniff"
    assert r.headers["X-Frame-Options"] == "DENY"
