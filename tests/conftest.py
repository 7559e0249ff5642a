from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator, Awaitable, Callable
from pathlib import Path
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-access-secret")
os.environ.setdefault("JWT_REFRESH_SECRET_KEY", "test-refresh-secret")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.config.settings import Settings
from src.infrastructure.auth.password import PasswordHasher
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import refresh_token, sheep, user  # noqa: F401
from src.interfaces.http.main import create_app


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "jwt_secret_key": "test-access-secret",
            "jwt_refresh_secret_key": "test-refresh-secret",
            "log_level": "INFO",
            "environment": "test",
        }
    )


@pytest.fixture()
def app(test_settings: Settings):
    # bcrypt is deliberately slow; pbkdf2 keeps the suite fast
    return create_app(
        settings=test_settings,
        password_hasher=PasswordHasher(schemes=("pbkdf2_sha256",)),
    )


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client
        await engine.dispose()


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def signup_user(client: AsyncClient) -> Callable[..., Awaitable[dict[str, Any]]]:
    async def _signup(username: str = "shepherd", **extra: Any) -> dict[str, Any]:
        payload = {
            "username": username,
            "email": f"{username}@example.com",
            "password": "secret123",
            **extra,
        }
        response = await client.post("/api/v1/auth/signup", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _signup


@pytest.fixture()
async def auth_headers(signup_user) -> dict[str, str]:
    data = await signup_user()
    return bearer(data["accessToken"])


@pytest.fixture()
def create_sheep(
    client: AsyncClient, auth_headers: dict[str, str]
) -> Callable[..., Awaitable[dict[str, Any]]]:
    async def _create(**fields: Any) -> dict[str, Any]:
        payload = {
            "tagNumber": "1",
            "gender": "female",
            "birthDate": "2022-01-01",
            "weight": 60,
            "breed": "Assaf",
            **fields,
        }
        response = await client.post("/api/v1/sheep", json=payload, headers=auth_headers)
        assert response.status_code == 201, response.text
        return response.json()["data"]["sheep"]

    return _create
