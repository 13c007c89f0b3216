"""
Tests for the authorization gate (credcore.security.dependencies).
"""
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from credcore.accounts.models import Role
from credcore.errors.exceptions import (
    InvalidTokenError,
    MissingTokenError,
    UserNotFoundError,
)
from credcore.security.dependencies import (
    authorize,
    extract_bearer_token,
    get_current_account,
    get_token_claims,
)
from credcore.security.tokens import issue_token


@pytest.fixture
def registered(directory):
    public = directory.register("a@x.com", "pw123", "cleaner")
    return directory.find_by_id(public["id"])


def test_extract_bearer_token():
    assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"


@pytest.mark.parametrize(
    "header",
    [None, "", "Bearer", "Bearer ", "bearer abc", "Basic abc", "Token abc", "abc", "Bearer a b"],
)
def test_extract_bearer_token_rejects_missing_or_malformed(header):
    with pytest.raises(MissingTokenError):
        extract_bearer_token(header)


def test_authorize_accepts_valid_token(settings, registered):
    token = issue_token(registered, settings)
    claims = authorize(f"Bearer {token}", settings)
    assert claims.subject == registered.id
    assert claims.role is Role.CLEANER


def test_authorize_missing_header(settings):
    with pytest.raises(MissingTokenError):
        authorize(None, settings)


def test_authorize_invalid_token(settings):
    with pytest.raises(InvalidTokenError):
        authorize("Bearer not-a-token", settings)


def test_authorize_expired_token(settings, registered):
    token = issue_token(
        registered,
        settings,
        issued_at=datetime.now(timezone.utc) - timedelta(minutes=16),
    )
    with pytest.raises(InvalidTokenError):
        authorize(f"Bearer {token}", settings)


def test_get_token_claims_returns_claims(settings, registered):
    token = issue_token(registered, settings)
    claims = get_token_claims(authorization=f"Bearer {token}", settings=settings)
    assert claims.email == "a@x.com"


def test_get_current_account_fresh_lookup(settings, directory, registered):
    claims = authorize(f"Bearer {issue_token(registered, settings)}", settings)
    account = get_current_account(claims=claims, directory=directory)
    assert account is registered


def test_get_current_account_vanished_account(settings, directory, registered):
    claims = authorize(f"Bearer {issue_token(registered, settings)}", settings)
    directory.clear()
    with pytest.raises(UserNotFoundError):
        get_current_account(claims=claims, directory=directory)


def test_settings_and_directory_come_from_app_state(settings, directory):
    from credcore.security.dependencies import get_directory, get_settings_dependency

    request = SimpleNamespace(
        app=SimpleNamespace(state=SimpleNamespace(settings=settings, directory=directory))
    )
    assert get_settings_dependency(request) is settings
    assert get_directory(request) is directory
