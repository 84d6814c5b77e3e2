from enum import Enum
from typing import Optional

from fixmanufacture.users.repository import UsersRepository


class Role(str, Enum):
    USER = "user"
    ADMIN = "admin"


def determine_role(raw: Optional[str]) -> Role:
    if str(raw or "").lower() == Role.ADMIN.value:
        return Role.ADMIN
    return Role.USER


class RoleResolver:
    """
    Résout le rôle d'un sujet à partir de la table users.
    - Utilisateur absent -> None (NotFound), jamais une exception.
    - is_admin échoue fermé: un sujet inconnu n'est jamais admin.
    """

    def __init__(self, users: UsersRepository):
        self.users = users

    def role_of(self, email: str) -> Optional[Role]:
        user = self.users.find_by_email(email)
        if user is None:
            return None
        return determine_role(user.get("role"))

    def is_admin(self, email: str) -> bool:
        return self.role_of(email) == Role.ADMIN
