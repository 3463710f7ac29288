"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and points the
application at SQLite before any settings are loaded.
"""

import os
import sys
from pathlib import Path

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "testing"
os.environ.setdefault("JWT_SECRET", "inpep-test-secret")

import pytest  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from api.dependencies import get_db, get_current_user  # noqa: E402
from domain.models.database import build_engine, init_database  # noqa: E402
from test_fixtures import app, client  # noqa: E402


# =============================================================================
# AUTHENTICATION OVERRIDE (route tests with patched services)
# =============================================================================


@pytest.fixture
def as_user():
    """
    Authenticate requests as a given (mock) user without issuing a token.

    Example:
        >>> def test_x(as_user):
        ...     provider = as_user(make_user(UserRole.PROVIDER))
    """

    def _login(user):
        app.dependency_overrides[get_current_user] = lambda: user
        return user

    yield _login
    app.dependency_overrides.pop(get_current_user, None)


# =============================================================================
# DATABASE FIXTURES (service, repository and end-to-end tests)
# =============================================================================


@pytest.fixture(scope="function")
def db_engine(tmp_path):
    """Fresh SQLite database file per test with the full schema"""
    engine = build_engine(f"sqlite:///{tmp_path / 'inpep-test.db'}")
    init_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    return sessionmaker(bind=db_engine, future=True, expire_on_commit=False)


@pytest.fixture(scope="function")
def db_session(session_factory):
    """
    Database session for integration tests.

    Each test works on its own SQLite file, so nothing leaks between tests.
    """
    session = session_factory()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def db_client(session_factory):
    """Test client whose requests run against the per-test database"""

    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    yield client
    app.dependency_overrides.pop(get_db, None)
