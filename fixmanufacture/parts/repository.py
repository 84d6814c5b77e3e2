"""Accès aux données pour les pièces (table parts)."""
from typing import Any, Dict, List, Optional
from fixmanufacture.infra.store import DocumentStore

PARTS_TABLE = "parts"


class PartsRepository:
    def __init__(self, store: DocumentStore):
        self.store = store

    def list(self) -> List[Dict[str, Any]]:
        return self.store.find(PARTS_TABLE)

    def get(self, part_id: str) -> Optional[Dict[str, Any]]:
        return self.store.find_one(PARTS_TABLE, {"id": part_id})

    def create(self, part: Dict[str, Any]) -> Dict[str, Any]:
        return self.store.insert(PARTS_TABLE, part)

    def set_quantity(self, part_id: str, quantity: int) -> Dict[str, Any]:
        """
        Écrase available_quantity (upsert sur id).
        Pas un décrément: deux écritures concurrentes -> la dernière gagne.
        """
        return self.store.upsert(PARTS_TABLE, {"id": part_id, "available_quantity": quantity}, on_conflict="id")
