"""
Shared fixtures, picked up by pytest for every test module.

Repository tests run against an in-memory SQLite database. StaticPool keeps a single connection alive,
otherwise every new connection would get its own (empty) in-memory database.
"""

from typing import Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings
from src.db.schema import Base

TEST_SETTINGS = Settings(database_url="sqlite:///:memory:", log_level="DEBUG")

engine = create_engine(
    TEST_SETTINGS.database_url,
    echo=TEST_SETTINGS.database_echo,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Fresh tables for every test, dropped again at teardown."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session_shared() -> Generator[Session, None, None]:
    """Session on the same engine as the others, tables are left in place (like several requests hitting one database)."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
