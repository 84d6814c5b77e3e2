"""
Service de jetons d'identité (JWT HS256, PyJWT).
- issue(email): signe {email, iat, exp=iat+1j, jti}; aucun état serveur.
- verify(token): vérifie signature et expiration sans consulter le store.
  Les échecs sont typés (TokenExpired, TokenSignatureInvalid, TokenMalformed); le guard les réduit à 403.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional
import uuid
import jwt

from fixmanufacture.config import TOKEN_TTL
from fixmanufacture.errors import TokenExpired, TokenMalformed, TokenSignatureInvalid

ALGORITHM = "HS256"


@dataclass(frozen=True)
class TokenClaims:
    email: str
    issued_at: datetime
    expires_at: datetime


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    def __init__(self, secret: str, ttl: timedelta = TOKEN_TTL, clock: Optional[Callable[[], datetime]] = None):
        if not secret:
            raise RuntimeError("ACCESS_TOKEN_SECRET manquant")
        self._secret = secret
        self._ttl = ttl
        self._clock = clock or _utcnow

    def issue(self, email: str) -> str:
        issued_at = self._clock()
        payload = {
            "email": email,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._ttl).timestamp()),
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"require": ["email", "iat", "exp"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpired(str(e)) from e
        except jwt.InvalidSignatureError as e:
            raise TokenSignatureInvalid(str(e)) from e
        except jwt.InvalidTokenError as e:
            raise TokenMalformed(str(e)) from e

        email = payload.get("email")
        if not isinstance(email, str) or not email:
            raise TokenMalformed("claim email invalide")
        return TokenClaims(
            email=email,
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
