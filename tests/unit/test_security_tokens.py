"""
Unit tests for the credcore.security.tokens package.
Covers: token issuance, verification, expiry and tamper detection.
"""
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from credcore.accounts.models import Account, Role
from credcore.config import TestingSettings
from credcore.errors.exceptions import InternalError, InvalidTokenError
from credcore.security.tokens import Claims, issue_token, verify_token
from credcore.security.tokens.service import build_payload
from credcore.security.tokens.utils import encode_jwt


@pytest.fixture
def account():
    return Account(email="A@x.com", password_hash="not-used", role=Role.CLEANER)


def test_issue_and_verify_round_trip(settings, account):
    token = issue_token(account, settings)
    claims = verify_token(token, settings)
    assert isinstance(claims, Claims)
    assert claims.subject == account.id
    assert claims.email == "A@x.com"
    assert claims.role is Role.CLEANER
    assert claims.expires_at - claims.issued_at == timedelta(minutes=15)


def test_token_payload_contents(settings, account):
    token = issue_token(account, settings)
    payload = jwt.decode(
        token,
        settings.JWT_SECRET_KEY,
        algorithms=["HS256"],
        audience=settings.JWT_AUDIENCE,
    )
    assert payload["sub"] == account.id
    assert payload["email"] == account.email
    assert payload["role"] == "cleaner"
    assert payload["iss"] == settings.JWT_ISSUER
    assert payload["exp"] - payload["iat"] == 15 * 60
    assert "password_hash" not in payload


def test_token_issued_more_than_lifetime_ago_is_rejected(settings, account):
    issued_at = datetime.now(timezone.utc) - timedelta(minutes=15, seconds=1)
    token = issue_token(account, settings, issued_at=issued_at)
    with pytest.raises(InvalidTokenError) as exc:
        verify_token(token, settings)
    assert exc.value.message == "invalid or expired token"


def test_token_within_lifetime_is_accepted(settings, account):
    issued_at = datetime.now(timezone.utc) - timedelta(minutes=14)
    token = issue_token(account, settings, issued_at=issued_at)
    assert verify_token(token, settings).subject == account.id


def test_tampered_payload_is_rejected(settings, account):
    token = issue_token(account, settings)
    header, payload, signature = token.split(".")
    other = issue_token(
        Account(email="b@x.com", password_hash="x", role=Role.CUSTOMER), settings
    )
    forged = ".".join([header, other.split(".")[1], signature])
    with pytest.raises(InvalidTokenError):
        verify_token(forged, settings)


def test_token_signed_with_other_secret_is_rejected(settings, account):
    other_settings = TestingSettings(JWT_SECRET_KEY="another-secret-key-of-32-bytes-min")
    token = issue_token(account, other_settings)
    with pytest.raises(InvalidTokenError):
        verify_token(token, settings)


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c", "Bearer x"])
def test_malformed_token_is_rejected(settings, token):
    with pytest.raises(InvalidTokenError):
        verify_token(token, settings)


def test_missing_claim_is_rejected(settings, account):
    payload = build_payload(account, settings)
    del payload["email"]
    token = encode_jwt(payload, settings)
    with pytest.raises(InvalidTokenError):
        verify_token(token, settings)


def test_unknown_role_claim_is_rejected(settings, account):
    payload = build_payload(account, settings)
    payload["role"] = "admin"
    token = encode_jwt(payload, settings)
    with pytest.raises(InvalidTokenError):
        verify_token(token, settings)


def test_wrong_audience_is_rejected(settings, account):
    payload = build_payload(account, settings)
    payload["aud"] = "someone-else"
    token = encode_jwt(payload, settings)
    with pytest.raises(InvalidTokenError):
        verify_token(token, settings)


def test_failures_are_indistinguishable(settings, account):
    expired = issue_token(
        account, settings, issued_at=datetime.now(timezone.utc) - timedelta(hours=1)
    )
    errors = []
    for token in (expired, "garbage", expired[:-2] + "xx"):
        with pytest.raises(InvalidTokenError) as exc:
            verify_token(token, settings)
        errors.append((exc.value.message, exc.value.status_code, exc.value.code))
    assert len(set(errors)) == 1


def test_signing_failure_raises_internal_error(settings, account, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("signing backend down")

    monkeypatch.setattr("credcore.security.tokens.service.encode_jwt", boom)
    with pytest.raises(InternalError):
        issue_token(account, settings)


def test_settings_loaded_from_environment_when_omitted(monkeypatch, account):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("JWT_SECRET_KEY", "env-secret-key-of-at-least-32-bytes")
    token = issue_token(account)
    assert verify_token(token).subject == account.id


def test_non_access_token_type_is_rejected(settings, account):
    payload = build_payload(account, settings)
    payload["type"] = "refresh"
    token = encode_jwt(payload, settings)
    with pytest.raises(InvalidTokenError):
        verify_token(token, settings)
