"""Couche d’accès aux données pour le domaine Utilisateurs (table users).
- La clé métier est l'email (unique); les profils sont écrits par upsert.
- Le rôle n'est jamais écrit depuis un corps de requête: seule promote_to_admin le modifie.
"""
from typing import Any, Dict, List, Optional
from fixmanufacture.infra.store import DocumentStore

USERS_TABLE = "users"


class UsersRepository:
    def __init__(self, store: DocumentStore):
        self.store = store

    def list(self) -> List[Dict[str, Any]]:
        return self.store.find(USERS_TABLE)

    def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """Retourne le document utilisateur ou None s'il n'existe pas."""
        if not email:
            return None
        return self.store.find_one(USERS_TABLE, {"email": email})

    def upsert_profile(self, email: str, profile: Dict[str, Any]) -> Dict[str, Any]:
        """Crée ou met à jour le profil identifié par email (champ role ignoré)."""
        payload = {k: v for k, v in (profile or {}).items() if k not in ("role", "email", "id")}
        payload["email"] = email
        return self.store.upsert(USERS_TABLE, payload, on_conflict="email")

    def promote_to_admin(self, email: str) -> int:
        """Passe role=admin; retourne le nombre de documents modifiés (0 si inconnu)."""
        rows = self.store.update(USERS_TABLE, {"email": email}, {"role": "admin"})
        return len(rows)
