from fastapi import Depends, HTTPException, Request

from fixmanufacture.auth.guards import AccessGuard, GuardContext, Reject
from fixmanufacture.auth.tokens import TokenClaims


def get_guard(request: Request) -> AccessGuard:
    return request.app.state.guard


def _enforce(guard: AccessGuard, ctx: GuardContext, steps) -> TokenClaims:
    outcome = guard.evaluate(ctx, steps)
    if isinstance(outcome, Reject):
        raise HTTPException(status_code=outcome.status_code, detail=outcome.message)
    return outcome.identity


def require_user(request: Request, guard: AccessGuard = Depends(get_guard)) -> TokenClaims:
    ctx = GuardContext(authorization=request.headers.get("Authorization"))
    return _enforce(guard, ctx, [guard.authenticated])


def require_owner(request: Request, guard: AccessGuard = Depends(get_guard)) -> TokenClaims:
    # L'email ciblé vient du segment de chemin ou, à défaut, du paramètre ?email=
    email = request.path_params.get("email") or request.query_params.get("email")
    ctx = GuardContext(authorization=request.headers.get("Authorization"), email_param=email)
    return _enforce(guard, ctx, [guard.authenticated, guard.owner_or_self])


def require_admin(request: Request, guard: AccessGuard = Depends(get_guard)) -> TokenClaims:
    ctx = GuardContext(authorization=request.headers.get("Authorization"))
    return _enforce(guard, ctx, [guard.authenticated, guard.admin])
