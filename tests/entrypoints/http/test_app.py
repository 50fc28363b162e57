"""
Unit tests for FastAPI application setup and configuration.

This test suite verifies the application structure and wiring:
- build_app() creates properly configured FastAPI instance
- Application metadata (title, version, docs URLs)
- Router registration (health at the root, products under /api)
- Unknown routes answer with the structured 404 body
- CORS headers
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from product_catalog.entrypoints.http.app import build_app


# ==============================================================================
# Application Creation
# ==============================================================================


def test_build_app_returns_fastapi_instance() -> None:
    """build_app() returns a FastAPI application instance."""
    assert isinstance(build_app(), FastAPI)


def test_build_app_creates_new_instance_each_call() -> None:
    """build_app() creates a new app instance for each call (not cached)."""
    assert build_app() is not build_app()


# ==============================================================================
# Application Metadata
# ==============================================================================


def test_app_metadata() -> None:
    app = build_app()

    assert app.title == "Product Catalog API"
    assert app.version == "0.1.0"
    assert "Catalog of priced, categorized products" in app.description


def test_app_documentation_endpoints_are_accessible() -> None:
    client = TestClient(build_app())

    assert client.get("/docs").status_code == 200
    assert client.get("/redoc").status_code == 200

    response = client.get("/openapi.json")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"


# ==============================================================================
# Router Registration
# ==============================================================================


def test_app_includes_health_router() -> None:
    client = TestClient(build_app())

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_app_registers_product_routes_under_api_prefix() -> None:
    # Verify via OpenAPI schema (doesn't trigger dependencies)
    paths = build_app().openapi()["paths"]

    assert "/products" not in paths
    assert set(paths["/api/products"]) == {"get", "post"}
    assert set(paths["/api/products/{product_id}"]) == {"get", "patch", "delete"}


def test_list_query_parameters_are_documented_in_camel_case() -> None:
    operation = build_app().openapi()["paths"]["/api/products"]["get"]

    names = {parameter["name"] for parameter in operation["parameters"]}

    assert names == {"page", "limit", "category", "minPrice", "maxPrice"}


# ==============================================================================
# Unknown routes
# ==============================================================================


@pytest.mark.parametrize("path", ["/api/unknown", "/api/products/a/b", "/"])
def test_unknown_route_returns_structured_404(path: str) -> None:
    client = TestClient(build_app())

    response = client.get(path)

    assert response.status_code == 404
    assert response.json() == {"detail": f"Route {path} not found", "code": "NOT_FOUND"}


# ==============================================================================
# CORS
# ==============================================================================


def test_cors_allows_any_origin_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)
    client = TestClient(build_app())

    response = client.get("/health", headers={"Origin": "http://shop.example"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_cors_origins_are_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://admin.example, http://shop.example")
    client = TestClient(build_app())

    allowed = client.get("/health", headers={"Origin": "http://shop.example"})
    denied = client.get("/health", headers={"Origin": "http://evil.example"})

    assert allowed.headers["access-control-allow-origin"] == "http://shop.example"
    assert "access-control-allow-origin" not in denied.headers
