# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from taskapi.config import Settings
from taskapi.db import build_engine, create_db_and_tables
from taskapi.main import create_app

SECRET = "test-secret"


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings pointing at a throwaway SQLite file, no log file.
    """
    return Settings(
        ENV="test",
        DATABASE_URL=f"sqlite:///{tmp_path / 'tasks.db'}",
        ACCESS_TOKEN_SECRET=SECRET,
        CORS_ORIGINS=["http://localhost:5173"],
        LOG_FILE="",
    )


@pytest.fixture()
def session(settings: Settings) -> Iterator[Session]:
    engine = build_engine(settings.DATABASE_URL)
    create_db_and_tables(engine)
    with Session(engine) as s:
        yield s
    engine.dispose()


@pytest.fixture()
def client(settings: Settings) -> Iterator[TestClient]:
    # context manager runs the lifespan (engine + tables)
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture()
def strict_client(settings: Settings) -> Iterator[TestClient]:
    settings.TASK_UPDATE_POLICY = "strict"
    with TestClient(create_app(settings)) as c:
        yield c
