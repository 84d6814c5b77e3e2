"""Couche service du domaine Utilisateurs.
- register_user: upsert du profil (clé email) puis émission d'un jeton d'accès valable 1 jour.
  C'est l'étape de login/inscription: elle n'exige pas de jeton préalable.
"""
from typing import Any, Dict
import logging

from fixmanufacture.auth.tokens import TokenService
from fixmanufacture.users.repository import UsersRepository

logger = logging.getLogger(__name__)

def register_user(users: UsersRepository, tokens: TokenService, email: str, profile: Dict[str, Any]) -> Dict[str, Any]:
    if "role" in (profile or {}):
        logger.warning("Ignoring role field in profile upsert for %s", email)
    result = users.upsert_profile(email, profile)
    access_token = tokens.issue(email)
    return {"result": result, "accessToken": access_token}
