# File: tests/conftest.py

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from authportal.core.config import Settings
from authportal.db.init_db import init_db
from authportal.main import create_application
from authportal.repository.user_repository import UserRepository


@pytest.fixture
def engine():
    # One shared in-memory database per test
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def repository(db):
    return UserRepository(db)


@pytest.fixture
def app(session_factory):
    app = create_application(settings=Settings(database_url="sqlite://"))
    # route requests to the shared in-memory database
    app.state.session_factory = session_factory
    return app


@pytest.fixture
def client(app):
    return TestClient(app)
