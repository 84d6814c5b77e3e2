"""
Client du store de documents (Supabase / PostgREST).
- Un objet DocumentStore explicite, construit au démarrage et injecté dans les repositories.
- Cycle de vie: init() au startup (lifespan), close() au shutdown.
- Chaque table est manipulée comme une collection: find/insert/update/upsert/delete par filtre d'égalité.
- Aucune exception n'est interceptée ici: les erreurs du store remontent à l'appelant.
"""
from typing import Any, Dict, List, Mapping, Optional
import logging
from supabase import create_client, Client

logger = logging.getLogger(__name__)

Filters = Mapping[str, Any]


def _apply_filters(query, filters: Optional[Filters]):
    for column, value in (filters or {}).items():
        if value is None:
            query = query.is_(column, "null")
        else:
            query = query.eq(column, value)
    return query


def _first_row(rows: List[Dict[str, Any]], operation: str, table: str) -> Dict[str, Any]:
    # une écriture sans ligne retournée ne permet pas de connaître l'id attribué
    if not rows:
        raise RuntimeError(f"{operation} sur {table}: aucune ligne retournée par le store")
    return rows[0]


class DocumentStore:
    def __init__(self, url: str, key: str):
        self._url = url
        self._key = key
        self._client: Optional[Client] = None

    def init(self) -> None:
        if self._client is not None:
            return
        if not self._url or not self._key:
            raise RuntimeError("SUPABASE_URL/SUPABASE_SERVICE_KEY manquants")
        self._client = create_client(self._url, self._key)
        logger.info("Document store connected (%s)", self._url)

    def close(self) -> None:
        # supabase-py ne garde pas de connexion persistante: on relâche le client
        self._client = None
        logger.info("Document store closed")

    @property
    def client(self) -> Client:
        if self._client is None:
            raise RuntimeError("DocumentStore non initialisé (appeler init())")
        return self._client

    def find(self, table: str, filters: Optional[Filters] = None) -> List[Dict[str, Any]]:
        res = _apply_filters(self.client.table(table).select("*"), filters).execute()
        return res.data or []

    def find_one(self, table: str, filters: Filters) -> Optional[Dict[str, Any]]:
        res = _apply_filters(self.client.table(table).select("*"), filters).limit(1).execute()
        rows = res.data or []
        return rows[0] if rows else None

    def insert(self, table: str, document: Dict[str, Any]) -> Dict[str, Any]:
        res = self.client.table(table).insert(document).execute()
        rows = res.data or []
        return _first_row(rows, "insert", table)

    def update(self, table: str, filters: Filters, changes: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Mise à jour mono-table; retourne les lignes modifiées ([] si aucun match)."""
        res = _apply_filters(self.client.table(table).update(changes), filters).execute()
        return res.data or []

    def upsert(self, table: str, document: Dict[str, Any], on_conflict: str = "id") -> Dict[str, Any]:
        res = self.client.table(table).upsert(document, on_conflict=on_conflict).execute()
        rows = res.data or []
        return _first_row(rows, "upsert", table)

    def delete(self, table: str, filters: Filters) -> List[Dict[str, Any]]:
        res = _apply_filters(self.client.table(table).delete(), filters).execute()
        return res.data or []
