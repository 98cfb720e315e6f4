from __future__ import annotations

import os

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("PRODASH_SESSION_SECRET", "test-secret")

from prodash.settings import reset_settings  # noqa: E402

ADMIN_EMAIL = "admin@example.com"


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'prodash-test.db'}")
    monkeypatch.setenv("PRODASH_SESSION_SECRET", "test-secret")
    monkeypatch.setenv("PRODASH_ADMIN_EMAILS", ADMIN_EMAIL)
    monkeypatch.setenv("PRODASH_STREAK_MODE", "parity")
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    reset_settings()
    from prodash.main import app

    with TestClient(app) as test_client:
        yield test_client
    reset_settings()


def register(client, email="ada@example.com", name="Ada Lovelace", password="correct-horse"):
    response = client.post(
        "/v1/auth/register",
        json={"name": name, "email": email, "password": password},
    )
    assert response.status_code == 200, response.text
    return response.json()["user"]
