import pytest
from fastapi.testclient import TestClient

from credcore.accounts import InMemoryUserDirectory
from credcore.config import TestingSettings
from credcore.factory import create_app
from credcore.security.password import configure_password_hashing

TEST_SECRET = "test-secret-key-with-at-least-32-bytes!"

CONFIG_ENV_VARS = [
    "APP_ENV",
    "APP_NAME",
    "DEBUG",
    "JWT_SECRET_KEY",
    "JWT_ALGORITHM",
    "JWT_ACCESS_TOKEN_EXPIRE_MINUTES",
    "JWT_AUDIENCE",
    "JWT_ISSUER",
    "PASSWORD_HASH_ROUNDS",
    "HOST",
    "PORT",
    "LOG_LEVEL",
    "LOG_JSON_FORMAT",
]


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    # Automatically clear configuration environment variables before each test
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def fast_hashing():
    """Minimum bcrypt work factor so tests hashing passwords stay fast."""
    configure_password_hashing(4)
    yield
    configure_password_hashing(4)


@pytest.fixture
def settings():
    """Testing settings with an explicit signing secret."""
    return TestingSettings(JWT_SECRET_KEY=TEST_SECRET)


@pytest.fixture
def directory():
    """An isolated account directory per test."""
    return InMemoryUserDirectory()


@pytest.fixture
def app(settings, directory):
    return create_app(settings=settings, directory=directory)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def register_and_login(client):
    """Register an account over HTTP and return (account_body, token)."""

    def _register_and_login(email="a@x.com", password="pw123", role=None):
        body = {"email": email, "password": password}
        if role is not None:
            body["role"] = role
        resp = client.post("/auth/register", json=body)
        assert resp.status_code == 201, resp.text
        login = client.post("/auth/login", json={"email": email, "password": password})
        assert login.status_code == 200, login.text
        return resp.json(), login.json()["token"]

    return _register_and_login

