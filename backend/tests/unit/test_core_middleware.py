"""
Unit tests for CORS middleware configuration.
Version: 1.0.0
"""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.middleware import apply_cors


def _app(origins):
    app = FastAPI()
    apply_cors(app, Settings(cors_allow_origins=origins))

    @app.get("/test")
    def test_endpoint():
        return {"ok": True}

    return app


@pytest.mark.unit
class TestApplyCors:
    """Tests for the apply_cors middleware function."""

    def test_apply_cors_adds_middleware(self):
        app = _app("*")
        middleware_classes = [m.cls.__name__ for m in app.user_middleware]
        assert "CORSMiddleware" in middleware_classes

    def test_cors_allows_any_origin(self):
        client = TestClient(_app("*"))
        resp = client.get("/test", headers={"Origin": "https://example.com"})
        assert resp.status_code == 200
        assert resp.headers.get("access-control-allow-origin") == "*"

    def test_explicit_origin_list(self):
        client = TestClient(_app("https://shop.test, https://admin.test"))
        allowed = client.get("/test", headers={"Origin": "https://shop.test"})
        denied = client.get("/test", headers={"Origin": "https://evil.test"})
        assert allowed.headers.get("access-control-allow-origin") == "https://shop.test"
        assert allowed.headers.get("access-control-allow-credentials") == "true"
        assert "access-control-allow-origin" not in denied.headers

    def test_cors_preflight(self):
        client = TestClient(_app("*"))
        resp = client.options(
            "/test",
            headers={"Origin": "https://example.com", "Access-Control-Request-Method": "POST"},
        )
        assert resp.status_code == 200
