"""
Shared test fixtures: SQLite test database, test client, stores.
"""

import os
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Point the app at the test database before importing app modules
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["STORE_BACKEND"] = "sql"

from buildcost.database import Base, get_db
from buildcost.main import app
from buildcost.store import InMemoryProjectStore, SqlProjectStore


TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def db():
    """Direct database session for test setup/assertions."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sql_store(db):
    return SqlProjectStore(db)


@pytest.fixture
def memory_store():
    return InMemoryProjectStore()


@pytest.fixture(params=["memory", "sql"])
def store(request):
    """Runs a test once against each store backend."""
    if request.param == "memory":
        return InMemoryProjectStore()
    return SqlProjectStore(request.getfixturevalue("db"))


def sample_project(**overrides):
    """Valid ProjectCreate payload in wire (camelCase) form."""
    data = {
        "projectName": "Green Valley Residency",
        "location": "Pune, Maharashtra",
        "floorArea": 2000,
        "numberOfFloors": 2,
        "materialType": "Standard",
        "additionalFeatures": [],
    }
    data.update(overrides)
    return data


@pytest.fixture
def project_payload():
    """Factory: project_payload(projectName="X") -> payload dict."""
    return sample_project
