"""Pytest configuration and fixtures for the face rec registry tests."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool


def pytest_configure(config):
    """Set up test environment before the app is imported."""
    os.environ.setdefault("FACEREC_ENVIRONMENT", "test")
    os.environ.setdefault("FACEREC_DATABASE_URL", "sqlite://")
    os.environ.setdefault("FACEREC_LOG_LEVEL", "DEBUG")


@pytest.fixture
def engine():
    from facerec.model.models import Base

    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    """TestClient wired to the in-memory database."""
    from facerec.data.database import get_db
    from facerec.main import app

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def image_upload():
    """Build the multipart payload for one file in the `image` field."""

    def build(payload: bytes = b"\xff\xd8\xff\xe0fake-jpeg", content_type: str = "image/jpeg"):
        return {"image": ("face.jpg", payload, content_type)}

    return build
