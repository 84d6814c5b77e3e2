from datetime import datetime, timedelta, timezone

import jwt
import pytest

from fixmanufacture.auth.tokens import TokenService
from fixmanufacture.errors import InvalidToken, TokenExpired, TokenMalformed, TokenSignatureInvalid

SECRET = "unit-test-secret-0123456789abcdefghijkl"


def test_issue_then_verify_returns_subject():
    svc = TokenService(SECRET)
    claims = svc.verify(svc.issue("alice@example.com"))
    assert claims.email == "alice@example.com"
    assert claims.expires_at - claims.issued_at == timedelta(days=1)


def test_two_issuances_are_independent():
    t0 = datetime.now(timezone.utc) - timedelta(hours=2)
    t1 = datetime.now(timezone.utc)
    first = TokenService(SECRET, clock=lambda: t0).issue("alice@example.com")
    second = TokenService(SECRET, clock=lambda: t1).issue("alice@example.com")
    assert first != second

    svc = TokenService(SECRET)
    c1, c2 = svc.verify(first), svc.verify(second)
    assert c1.email == c2.email == "alice@example.com"
    assert c1.expires_at == c1.issued_at + timedelta(days=1)
    assert c2.expires_at == c2.issued_at + timedelta(days=1)
    assert c2.expires_at > c1.expires_at


def test_same_instant_issuances_still_differ():
    now = datetime.now(timezone.utc)
    svc = TokenService(SECRET, clock=lambda: now)
    assert svc.issue("a@b.c") != svc.issue("a@b.c")


def test_expired_token():
    issued = datetime.now(timezone.utc) - timedelta(days=2)
    token = TokenService(SECRET, clock=lambda: issued).issue("alice@example.com")
    with pytest.raises(TokenExpired):
        TokenService(SECRET).verify(token)


def test_bad_signature():
    token = TokenService("another-secret-0123456789abcdefghijklmn").issue("alice@example.com")
    with pytest.raises(TokenSignatureInvalid):
        TokenService(SECRET).verify(token)


def test_malformed_token():
    with pytest.raises(TokenMalformed):
        TokenService(SECRET).verify("not-a-jwt")


def test_missing_email_claim_is_malformed():
    now = datetime.now(timezone.utc)
    token = jwt.encode(
        {"iat": int(now.timestamp()), "exp": int((now + timedelta(hours=1)).timestamp())},
        SECRET,
        algorithm="HS256",
    )
    with pytest.raises(TokenMalformed):
        TokenService(SECRET).verify(token)


def test_all_failures_share_base_class():
    assert issubclass(TokenExpired, InvalidToken)
    assert issubclass(TokenMalformed, InvalidToken)
    assert issubclass(TokenSignatureInvalid, InvalidToken)


def test_empty_secret_rejected():
    with pytest.raises(RuntimeError):
        TokenService("")
