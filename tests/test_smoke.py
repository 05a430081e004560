"""Smoke tests for the gateway's envelope, methods and routing."""

import pytest

CORS = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "GET, OPTIONS",
    "access-control-allow-headers": "Content-Type",
}


def assert_envelope_headers(response):
    for name, value in CORS.items():
        assert response.headers[name] == value
    assert response.headers["cache-control"] == "no-store"


def test_health_endpoint(client):
    """Health returns the literal body every time."""
    bodies = {client.get("/health").content for _ in range(3)}
    assert bodies == {b'{"ok":true}'}


def test_root_is_health(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


def test_json_headers(client):
    r = client.get("/health")
    assert r.headers["content-type"] == "application/json; charset=utf-8"
    assert_envelope_headers(r)
    assert r.headers.get("x-request-id")


@pytest.mark.parametrize("path", ["/", "/quote", "/joke", "/anything/at/all"])
def test_options_preflight(client, upstream, path):
    r = client.options(path)
    assert r.status_code == 204
    assert r.content == b""
    assert "content-type" not in r.headers
    assert_envelope_headers(r)
    assert sum(upstream.calls.values()) == 0


def test_unknown_path(client):
    r = client.get("/nope")
    assert r.status_code == 404
    assert r.json() == {"error": "Not found"}
    assert r.headers["content-type"] == "application/json; charset=utf-8"
    assert_envelope_headers(r)


@pytest.mark.parametrize("method", ["POST", "PUT", "DELETE", "PATCH"])
def test_method_not_allowed(client, upstream, method):
    r = client.request(method, "/quote")
    assert r.status_code == 405
    assert r.json() == {"error": "Method not allowed"}
    assert_envelope_headers(r)
    assert sum(upstream.calls.values()) == 0


def test_method_checked_before_route(client):
    r = client.post("/nope")
    assert r.status_code == 405


def test_head_not_allowed(client):
    r = client.head("/health")
    assert r.status_code == 405


@pytest.mark.parametrize("path", ["/health/", "/quote/", "/quote/list//"])
def test_trailing_slashes_stripped(client, path):
    r = client.get(path)
    assert r.status_code == 200
    assert r.history == []


def test_docs_not_exposed(client):
    assert client.get("/docs").status_code == 404
    assert client.get("/openapi.json").status_code == 404
