from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator, Callable
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")
os.environ.setdefault("LOCAL_STORE_PATH", "")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.application.use_cases.setup import seed_reference_data
from src.config.settings import Settings
from src.domain.models.user import User
from src.infrastructure.auth.password import PasswordHasher
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import delivery_entry, delivery_type, user  # noqa: F401
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.infrastructure.gateways.local_store import LocalStore
from src.infrastructure.gateways.reference_data import default_delivery_types, default_users
from src.interfaces.http.main import create_app

TEST_PASSWORD = "entregas-2024"


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "jwt_secret_key": "test-secret",
            "log_level": "INFO",
            "local_store_path": None,
        }
    )


@pytest.fixture()
def local_store(tmp_path) -> LocalStore:
    return LocalStore(tmp_path / "local_store.json")


@pytest.fixture()
def app(test_settings: Settings, local_store: LocalStore):
    return create_app(
        settings=test_settings,
        local_store=local_store,
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
    await app.state.engine.dispose()


@pytest.fixture()
async def seeded_users(app, client) -> dict[str, User]:
    uow = SQLAlchemyUnitOfWork(app.state.session_factory)
    async with uow:
        await seed_reference_data.execute(
            uow=uow,
            password_hasher=app.state.password_hasher,
            delivery_types=default_delivery_types(),
            users=default_users(),
            initial_password=TEST_PASSWORD,
        )
    return {u.name.lower(): u for u in default_users()}


@pytest.fixture()
def token_factory(app) -> Callable[[User], str]:
    def make(user: User) -> str:
        return app.state.jwt_service.create_access_token(
            subject=user.id, extra_claims={"name": user.name, "role": user.role.value}
        )

    return make


@pytest.fixture()
def headers_for(token_factory) -> Callable[[User], dict[str, str]]:
    def make(user: User) -> dict[str, str]:
        return {"Authorization": f"Bearer {token_factory(user)}"}

    return make
