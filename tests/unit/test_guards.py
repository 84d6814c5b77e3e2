from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

from fixmanufacture.auth.guards import AccessGuard, Admit, GuardContext, Reject
from fixmanufacture.auth.roles import RoleResolver
from fixmanufacture.auth.tokens import TokenService
from fixmanufacture.users.repository import UsersRepository

SECRET = "guard-test-secret-0123456789abcdefghijk"


def _guard(store):
    return AccessGuard(TokenService(SECRET), RoleResolver(UsersRepository(store)))


def _bearer(email, issued=None):
    svc = TokenService(SECRET, clock=(lambda: issued) if issued else None)
    return f"Bearer {svc.issue(email)}"


def test_missing_header_is_401(store):
    guard = _guard(store)
    ctx = GuardContext(authorization=None)
    outcome = guard.evaluate(ctx, [guard.authenticated])
    assert outcome == Reject(401, "Unauthorized", "missing authorization header")


def test_non_bearer_header_is_403(store):
    guard = _guard(store)
    outcome = guard.evaluate(GuardContext(authorization="Basic abc"), [guard.authenticated])
    assert isinstance(outcome, Reject) and outcome.status_code == 403


def test_bearer_without_token_is_403(store):
    guard = _guard(store)
    outcome = guard.evaluate(GuardContext(authorization="Bearer "), [guard.authenticated])
    assert isinstance(outcome, Reject) and outcome.status_code == 403


def test_expired_token_is_403(store):
    guard = _guard(store)
    header = _bearer("alice@example.com", issued=datetime.now(timezone.utc) - timedelta(days=3))
    outcome = guard.evaluate(GuardContext(authorization=header), [guard.authenticated])
    assert isinstance(outcome, Reject) and outcome.status_code == 403


def test_valid_token_attaches_identity(store):
    guard = _guard(store)
    ctx = GuardContext(authorization=_bearer("alice@example.com"))
    outcome = guard.evaluate(ctx, [guard.authenticated])
    assert isinstance(outcome, Admit)
    assert outcome.identity.email == "alice@example.com"
    assert ctx.identity.email == "alice@example.com"


def test_owner_or_self(store):
    guard = _guard(store)
    steps = [guard.authenticated, guard.owner_or_self]
    ok = guard.evaluate(GuardContext(_bearer("alice@example.com"), email_param="alice@example.com"), steps)
    assert isinstance(ok, Admit)
    mismatch = guard.evaluate(GuardContext(_bearer("alice@example.com"), email_param="bob@example.com"), steps)
    assert isinstance(mismatch, Reject) and mismatch.status_code == 403
    missing = guard.evaluate(GuardContext(_bearer("alice@example.com")), steps)
    assert isinstance(missing, Reject) and missing.status_code == 403


def test_admin_step(seed_users):
    guard = _guard(seed_users)
    steps = [guard.authenticated, guard.admin]
    assert isinstance(guard.evaluate(GuardContext(_bearer("admin@example.com")), steps), Admit)
    for email in ("alice@example.com", "bob@example.com", "ghost@example.com"):
        outcome = guard.evaluate(GuardContext(_bearer(email)), steps)
        assert isinstance(outcome, Reject) and outcome.status_code == 403


def test_admin_without_identity_fails_closed(seed_users):
    guard = _guard(seed_users)
    outcome = guard.evaluate(GuardContext(authorization=None), [guard.admin])
    assert isinstance(outcome, Reject) and outcome.status_code == 401


def test_rejection_short_circuits_role_lookup():
    roles = MagicMock(spec=RoleResolver)
    guard = AccessGuard(TokenService(SECRET), roles)
    outcome = guard.evaluate(GuardContext(authorization="Bearer garbage"), [guard.authenticated, guard.admin])
    assert isinstance(outcome, Reject) and outcome.status_code == 403
    roles.is_admin.assert_not_called()


def test_guard_never_writes(seed_users):
    guard = _guard(seed_users)
    before = list(seed_users.writes)
    guard.evaluate(GuardContext(_bearer("alice@example.com")), [guard.authenticated, guard.admin])
    guard.evaluate(GuardContext(_bearer("admin@example.com")), [guard.authenticated, guard.admin])
    assert seed_users.writes == before
