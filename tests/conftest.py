"""
Shared fixtures: a throw-away SQLite store and a fake frontend build.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from portfolio_api.database import create_store_engine
from portfolio_api.main import create_app
from portfolio_api.store import StoreGateway

INDEX_HTML = b"<!doctype html><html><body><div id=\"app\"></div></body></html>"
FAVICON = b"\x00\x00\x01\x00fake-icon"
APP_JS = b"console.log('app');"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("PORT", "APP_PORT", "STATIC_DIR", "CORS_ORIGINS", "JWT_ALG", "JWT_EXPIRES_MINUTES"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("JWT_SECRET", "test-secret-0123456789abcdef-0123456789")


@pytest.fixture
def engine(tmp_path):
    eng = create_store_engine(f"sqlite:///{tmp_path / 'app.db'}")
    yield eng
    eng.dispose()


@pytest.fixture
def store(engine):
    return StoreGateway(engine)


@pytest.fixture
def broken_store(tmp_path):
    # parent directory does not exist, so every connect fails
    eng = create_store_engine(f"sqlite:///{tmp_path / 'missing' / 'app.db'}")
    yield StoreGateway(eng)
    eng.dispose()


@pytest.fixture
def static_dir(tmp_path) -> Path:
    root = tmp_path / "static"
    (root / "assets").mkdir(parents=True)
    (root / "index.html").write_bytes(INDEX_HTML)
    (root / "favicon.ico").write_bytes(FAVICON)
    (root / "assets" / "app.js").write_bytes(APP_JS)
    return root


@pytest.fixture
def spa_client(store, static_dir):
    return TestClient(create_app(store, static_dir=static_dir))


@pytest.fixture
def api_client(store, tmp_path):
    return TestClient(create_app(store, static_dir=tmp_path / "no-static"))
