# ruff: noqa: INP001
"""CORS allow-list parsing and response headers."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from tasks_api.core.cors import install_cors, parse_cors_origins


def _app(origins: list[str]) -> FastAPI:
    app = FastAPI()
    install_cors(app, origins)

    @app.get("/ok")
    def ok() -> dict[str, bool]:
        return {"ok": True}

    return app


def test_parse_cors_origins_trims_and_drops_blanks() -> None:
    assert parse_cors_origins(" https://a.example , ,https://b.example,") == [
        "https://a.example",
        "https://b.example",
    ]
    assert parse_cors_origins("") == []


def test_wildcard_allows_any_origin_without_credentials() -> None:
    response = TestClient(_app(["*"])).get("/ok", headers={"Origin": "https://anywhere.example"})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert "access-control-allow-credentials" not in response.headers


def test_explicit_origin_is_reflected_with_credentials() -> None:
    app = _app(["https://app.example", "https://admin.example"])

    response = TestClient(app).get("/ok", headers={"Origin": "https://admin.example"})

    assert response.headers["access-control-allow-origin"] == "https://admin.example"
    assert response.headers["access-control-allow-credentials"] == "true"


def test_unlisted_origin_gets_no_allow_origin_header() -> None:
    app = _app(["https://app.example"])

    response = TestClient(app).get("/ok", headers={"Origin": "https://evil.example"})

    assert response.status_code == 200
    assert "access-control-allow-origin" not in response.headers


def test_preflight_is_answered_with_allowed_methods() -> None:
    app = _app(["https://app.example"])

    response = TestClient(app).options(
        "/ok",
        headers={
            "Origin": "https://app.example",
            "Access-Control-Request-Method": "PUT",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "https://app.example"
    assert "PUT" in response.headers["access-control-allow-methods"]


def test_empty_origin_list_disables_cors() -> None:
    response = TestClient(_app([])).get("/ok", headers={"Origin": "https://app.example"})

    assert response.status_code == 200
    assert "access-control-allow-origin" not in response.headers
