import os
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.controller import TrackerController
from app.db.base import Base
from app.db.store import TrackerStore
from app.main import create_app

TEST_DB_FILE = "test_assignment_tracker.db"
TEST_DB_URL = f"sqlite:///./{TEST_DB_FILE}"

engine = create_engine(
    TEST_DB_URL,
    connect_args={"check_same_thread": False},
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Monday, local noon
TODAY = datetime(2024, 6, 3, 12, 0).astimezone()


class FakeClock:
    """Settable stand-in for the wall clock."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture(scope="session", autouse=True)
def setup_test_db():
    """Create a fresh schema once for the whole test session."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
    if os.path.exists(TEST_DB_FILE):
        os.remove(TEST_DB_FILE)


@pytest.fixture(autouse=True)
def clean_tables():
    """Every test starts from empty storage."""
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())
    yield


@pytest.fixture()
def clock():
    return FakeClock(TODAY)


@pytest.fixture()
def store():
    return TrackerStore(TestingSessionLocal)


@pytest.fixture()
def controller(store, clock):
    return TrackerController(store, clock=clock).load()


@pytest.fixture()
def client(controller):
    """Test client wired to the test controller instead of the on-disk app database."""
    with TestClient(create_app(controller)) as c:
        yield c
