# tests/conftest.py
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from ticketdesk.core.database import Base, get_db, init_db, make_engine
from ticketdesk.main import app

engine = make_engine("sqlite://")
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def db_app():
    """The service wired to a fresh in-memory database."""
    init_db(bind=engine)
    app.dependency_overrides[get_db] = override_get_db
    yield app
    app.dependency_overrides.clear()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_app):
    return TestClient(db_app)


@pytest.fixture
def db_session(db_app):
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
