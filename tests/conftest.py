"""Shared fixtures: an in-memory SQLite store wired into the linkage service."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from aadhaar_linkage.core.database import Base, get_db
from aadhaar_linkage.main import app
from aadhaar_linkage.repositories.linkage_repository import LinkageRepository
from aadhaar_linkage.services.linkage_service import LinkageService


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture
def repository(db_session):
    return LinkageRepository(db_session)


@pytest.fixture
def service(repository):
    return LinkageService(repository)


@pytest.fixture
def person_data():
    return {
        "aadhaar_number": "1234",
        "dob": "1990-01-01",
        "forename": "A",
        "lastname": "B",
    }


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
