"""Shared test fixtures for itemkeeper."""

import pytest

from itemkeeper.auth.schemas import UserResponse
from itemkeeper.config import Settings
from itemkeeper.main import create_app


@pytest.fixture
def test_settings():
    """Settings with a fast bcrypt work factor and a known secret."""
    return Settings(
        jwt_secret_key="test-secret-key",
        bcrypt_work_factor=4,
        _env_file=None,
    )


@pytest.fixture
def app(test_settings):
    """Fresh app with the seeded admin user and sample items.

    Each test gets its own stores.
    """
    app = create_app(config=test_settings)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    """Create test client for API testing."""
    with app.test_client() as client:
        yield client


@pytest.fixture
def core(app):
    """The app's stores and token codec."""
    return app.extensions["itemkeeper"]


@pytest.fixture
def token_codec(core):
    return core.tokens


@pytest.fixture
def admin_user():
    """Public view of the seeded admin user."""
    return UserResponse(id=1, username="admin", email="admin@test.com")


@pytest.fixture
def auth_headers(token_codec, admin_user):
    """Authorization header for the seeded admin user."""
    return {"Authorization": f"Bearer {token_codec.issue(admin_user)}"}


@pytest.fixture
def other_user(core):
    """A second user with no items.

    Returns a tuple of (user, password).
    """
    password = "OtherPass123"
    user = core.users.create_user("other", password, "other@test.com")
    return user.public(), password


@pytest.fixture
def other_headers(token_codec, other_user):
    """Authorization header for the second user."""
    user, _password = other_user
    return {"Authorization": f"Bearer {token_codec.issue(user)}"}
