"""
Shared pytest fixtures for the HR regression suite.

Most fixtures here serve the fast tests that exercise the demo HR app
through the Flask test client. The session-scoped site fixtures at the
bottom resolve the running site shared by the e2e and smoke suites;
browser fixtures live in tests/e2e/conftest.py.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- Fixture dependencies
- Test data factories
- Database setup/teardown
- Test client creation
"""

import os
from collections.abc import Generator

import pytest
from faker import Faker

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"

from config import SuiteConfig, get_suite_config
from demo_hr import create_app, db
from demo_hr.models import User, seed_defaults
from shared.live_stack import SiteUrls, live_site_urls
from shared.test_data import signup_data

fake = Faker("en_GB")


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def app():
    """
    Demo HR app on an in-memory database with no overlays.

    The on-disk testing database belongs to the live server started by
    the browser suites, so the test client gets its own.
    """
    application = create_app(
        "testing",
        {"SQLALCHEMY_DATABASE_URI": "sqlite://", "DEFAULT_OVERLAYS": ""},
    )
    yield application


@pytest.fixture(scope="function")
def db_session(app):
    """
    Fresh, seeded database for each test.

    Yields:
        The Flask-SQLAlchemy extension, inside an app context.
    """
    with app.app_context():
        db.drop_all()
        db.create_all()
        seed_defaults(
            admin_email=app.config["ADMIN_EMAIL"],
            admin_password=app.config["ADMIN_PASSWORD"],
            employee_id=app.config["EMPLOYEE_ID"],
        )
        yield db
        db.session.rollback()


@pytest.fixture(scope="function")
def client(app, db_session):
    """Test client over a freshly seeded database."""
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def admin_client(app, client):
    """Test client already logged in as the seeded admin."""
    response = client.post(
        "/login",
        data={"email": app.config["ADMIN_EMAIL"], "password": app.config["ADMIN_PASSWORD"]},
    )
    assert response.status_code == 302
    return client


@pytest.fixture
def employee_id(app) -> int:
    return app.config["EMPLOYEE_ID"]


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def user_factory(db_session):
    """
    Factory fixture for creating User rows.

    Example:
        def test_something(user_factory):
            user = user_factory(email="someone@example.com")
    """

    def _create_user(email: str | None = None, password: str = "Password123") -> User:
        user = User(
            email=(email or fake.unique.email()).lower(),
            first_name=fake.first_name(),
            last_name=fake.last_name(),
            company_name=fake.company(),
        )
        user.set_password(password)
        db_session.session.add(user)
        db_session.session.commit()
        return user

    return _create_user


@pytest.fixture
def valid_signup_form() -> dict[str, str]:
    """A complete sign-up submission, terms accepted."""
    return {**signup_data(), "terms": "1"}


# -----------------------------------------------------------------------------
# Live Site Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def suite_config() -> type[SuiteConfig]:
    return get_suite_config()


@pytest.fixture(scope="session")
def site_urls(suite_config: type[SuiteConfig]) -> Generator[SiteUrls, None, None]:
    """
    Return the hosts to drive, shared by the e2e and smoke suites.

    If TEST_BASE_URL is set, use that site. If the suite configuration
    names a hosted environment, use it. Otherwise start the demo replica
    once for the whole session.
    """
    yield from live_site_urls(suite_config)
