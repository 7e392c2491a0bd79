import sys
from pathlib import Path

# Project root goes first on the path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# SQLite engine for tests, created BEFORE the app is imported
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///./test.db"
test_engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

# PATCH: swap engine and SessionLocal in core.database BEFORE importing the app
import taskdesk.core.database
taskdesk.core.database.engine = test_engine
taskdesk.core.database.SessionLocal = TestingSessionLocal

# Now the app picks up the SQLite engine
from taskdesk.core.database import Base, get_db
from taskdesk.main import app

def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

@pytest.fixture(autouse=True)
def setup_teardown():
    """Fresh tables for every test"""
    Base.metadata.drop_all(bind=test_engine)
    Base.metadata.create_all(bind=test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)

app.dependency_overrides[get_db] = override_get_db


@pytest.fixture
def client():
    """FastAPI test client"""
    from fastapi.testclient import TestClient
    return TestClient(app)


@pytest.fixture
def db():
    """DB session for service tests"""
    db = TestingSessionLocal()
    yield db
    db.close()


@pytest.fixture
def make_task(client):
    """Creates a task through the API and returns its JSON"""
    def _make_task(**fields):
        payload = {"title": "Task"}
        payload.update(fields)
        response = client.post("/tasks", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make_task
