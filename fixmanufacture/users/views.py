# module fixmanufacture.users.views

"""Endpoints utilisateurs et rôles.
- PUT /users/{email}: upsert du profil + jeton d'accès (rate-limité).
- GET /admin/{email}: indique si l'email est admin (inconnu -> false).
- PUT /users/admin/{email}: promotion admin (require_admin).
- GET /users: liste des utilisateurs (require_admin).
"""
from typing import Any, Dict, List
from fastapi import APIRouter, Depends

from fixmanufacture.auth.dependencies import require_admin
from fixmanufacture.auth.roles import RoleResolver
from fixmanufacture.auth.tokens import TokenClaims, TokenService
from fixmanufacture.dependencies import get_roles, get_tokens, get_users
from fixmanufacture.users.models import UserProfile
from fixmanufacture.users.repository import UsersRepository
from fixmanufacture.users.service import register_user
from fixmanufacture.utils.rate_limit import optional_rate_limit

router = APIRouter(tags=["Users"])


@router.put("/users/{email}", dependencies=[Depends(optional_rate_limit(times=10, seconds=60))])
def upsert_user(
    email: str,
    body: UserProfile,
    users: UsersRepository = Depends(get_users),
    tokens: TokenService = Depends(get_tokens),
):
    return register_user(users, tokens, email, body.model_dump(exclude_none=True))


@router.get("/admin/{email}")
def check_admin(email: str, roles: RoleResolver = Depends(get_roles)):
    return {"admin": roles.is_admin(email)}


@router.put("/users/admin/{email}")
def make_admin(
    email: str,
    admin: TokenClaims = Depends(require_admin),
    users: UsersRepository = Depends(get_users),
):
    return {"modifiedCount": users.promote_to_admin(email)}


@router.get("/users")
def list_users(
    admin: TokenClaims = Depends(require_admin),
    users: UsersRepository = Depends(get_users),
) -> List[Dict[str, Any]]:
    return users.list()
