"""
Pytest configuration for the phone inventory API.

Provides fixtures for:
- an in-memory SQLite engine shared across connections (StaticPool)
- a session bound to that engine
- a FastAPI app / TestClient built on the same engine
"""

from __future__ import annotations

from typing import Callable, Dict, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from phone_inventory.db.CRUD import create_db, create_phone, drop_db
from phone_inventory.db.database import make_session_factory
from phone_inventory.main import create_app
from phone_inventory.settings.db_settings import Settings


@pytest.fixture(scope="function")
def test_settings() -> Settings:
    return Settings(SYNC_DATABASE_URL="sqlite://", LOG_LEVEL="DEBUG")


@pytest.fixture(scope="function")
def engine() -> Generator[Engine, None, None]:
    """
    Fresh in-memory database per test; tables created up front.
    """
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_db(eng)
    try:
        yield eng
    finally:
        drop_db(eng)
        eng.dispose()


@pytest.fixture(scope="function")
def db(engine: Engine) -> Generator[Session, None, None]:
    session = make_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(test_settings: Settings, engine: Engine) -> Generator[TestClient, None, None]:
    app = create_app(settings=test_settings, engine=engine)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def phone_fields() -> Dict[str, object]:
    return {"company": "apple", "model": "iphone 16 pro", "quantity": 12345, "price": "1099"}


@pytest.fixture
def seed_phones(db: Session) -> Callable[[int], None]:
    """
    Insert N valid phones directly through the store.
    """

    def _seed(n: int) -> None:
        for i in range(n):
            create_phone(
                db,
                {"company": f"company-{i}", "model": f"model-{i}", "quantity": 10000 + i, "price": "10.50"},
            )

    return _seed
