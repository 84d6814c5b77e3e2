"""
Guard d'accès: chaîne ordonnée de vérifications sur une requête.
- authenticated: en-tête Authorization requis (absent -> 401), jeton Bearer valide (sinon -> 403).
  En cas de succès, l'identité vérifiée est attachée au contexte.
- owner_or_self: l'email de l'identité doit être égal à l'email ciblé par la route (sinon -> 403).
- admin: le rôle de l'identité (via RoleResolver) doit être "admin" (sinon, inconnu compris -> 403).
Le guard n'écrit jamais dans le store; le premier rejet interrompt la chaîne.
"""
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Union
import logging

from fixmanufacture.auth.roles import RoleResolver
from fixmanufacture.auth.tokens import TokenClaims, TokenService
from fixmanufacture.errors import InvalidToken

logger = logging.getLogger(__name__)

UNAUTHORIZED = "Unauthorized"
FORBIDDEN = "Forbidden"


@dataclass
class GuardContext:
    authorization: Optional[str]
    email_param: Optional[str] = None
    identity: Optional[TokenClaims] = None


@dataclass(frozen=True)
class Admit:
    identity: TokenClaims


@dataclass(frozen=True)
class Reject:
    status_code: int
    message: str
    reason: str = ""


GuardResult = Union[Admit, Reject]
Step = Callable[[GuardContext], Optional[Reject]]


def _bearer_token(header: str) -> Optional[str]:
    scheme, _, token = header.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


class AccessGuard:
    def __init__(self, tokens: TokenService, roles: RoleResolver):
        self.tokens = tokens
        self.roles = roles

    def authenticated(self, ctx: GuardContext) -> Optional[Reject]:
        if not ctx.authorization:
            return Reject(401, UNAUTHORIZED, "missing authorization header")
        token = _bearer_token(ctx.authorization)
        if token is None:
            return Reject(403, FORBIDDEN, "not a bearer credential")
        try:
            ctx.identity = self.tokens.verify(token)
        except InvalidToken as e:
            return Reject(403, FORBIDDEN, f"{type(e).__name__}")
        return None

    def owner_or_self(self, ctx: GuardContext) -> Optional[Reject]:
        if ctx.identity is None:
            return Reject(401, UNAUTHORIZED, "owner check without identity")
        if not ctx.email_param or ctx.email_param != ctx.identity.email:
            return Reject(403, FORBIDDEN, "email mismatch")
        return None

    def admin(self, ctx: GuardContext) -> Optional[Reject]:
        if ctx.identity is None:
            return Reject(401, UNAUTHORIZED, "admin check without identity")
        if not self.roles.is_admin(ctx.identity.email):
            return Reject(403, FORBIDDEN, "not an admin")
        return None

    def evaluate(self, ctx: GuardContext, steps: Sequence[Step]) -> GuardResult:
        for step in steps:
            rejection = step(ctx)
            if rejection is not None:
                logger.info("Access rejected (%s): %s", rejection.status_code, rejection.reason)
                return rejection
        if ctx.identity is None:
            return Reject(401, UNAUTHORIZED, "no identity")
        return Admit(ctx.identity)
