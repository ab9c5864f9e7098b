"""Test configuration and fixtures for CoAuthorsQL."""

from dotenv import load_dotenv
import pytest
import os
from typing import Generator
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from coauthorsql.sql.models import Base

# Try to load environment variables from .env file
load_dotenv()


@pytest.fixture(scope="function")
def engine():
    """Create a test database engine for each test function."""
    test_db_url = os.getenv('COAUTHORSQL_TEST_DATABASE_URL')
    if test_db_url:
        engine = create_engine(test_db_url, echo=False, future=True, pool_pre_ping=True)
        # Ensure a clean slate before tests
        Base.metadata.drop_all(engine)
        Base.metadata.create_all(engine)
        is_external_db = True
        print(f"Using external database: {test_db_url}")
    else:
        # In-memory SQLite shared by every session of the test
        engine = create_engine(
            "sqlite://",
            echo=False,
            future=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(engine)
        is_external_db = False

    yield engine

    if is_external_db:
        Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine) -> sessionmaker:
    return sessionmaker(engine, class_=Session, expire_on_commit=False)


@pytest.fixture(scope="function")
def db_session(session_factory) -> Generator[Session, None, None]:
    """Create a new database session for each test function."""
    with session_factory() as session:
        yield session


# Import fixtures from fixtures module
from tests.fixtures import (
    sample_users,
    sample_guest_authors,
    sample_terms,
    sample_posts,
    populated_db,
)
