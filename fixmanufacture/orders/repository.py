"""Accès aux données pour les commandes (table orders).
- Chaque méthode est une opération mono-document (atomique côté store).
- mark_paid est conditionnée sur paid=false: une commande payée n'est jamais réécrite.
- delete_unpaid est conditionnée de la même façon: une commande payée entre-temps n'est pas supprimée.
"""
from typing import Any, Dict, List, Optional
from fixmanufacture.infra.store import DocumentStore

ORDERS_TABLE = "orders"


class OrdersRepository:
    def __init__(self, store: DocumentStore):
        self.store = store

    def insert(self, order: Dict[str, Any]) -> Dict[str, Any]:
        return self.store.insert(ORDERS_TABLE, order)

    def get(self, order_id: str) -> Optional[Dict[str, Any]]:
        return self.store.find_one(ORDERS_TABLE, {"id": order_id})

    def list_by_email(self, email: str) -> List[Dict[str, Any]]:
        return self.store.find(ORDERS_TABLE, {"email": email})

    def list_all(self) -> List[Dict[str, Any]]:
        return self.store.find(ORDERS_TABLE)

    def mark_paid(self, order_id: str, transaction_id: str) -> Optional[Dict[str, Any]]:
        """Retourne la commande mise à jour, ou None si aucune commande non payée ne correspond."""
        rows = self.store.update(
            ORDERS_TABLE,
            {"id": order_id, "paid": False},
            {"paid": True, "transactionId": transaction_id},
        )
        return rows[0] if rows else None

    def delete(self, order_id: str) -> int:
        return len(self.store.delete(ORDERS_TABLE, {"id": order_id}))

    def delete_unpaid(self, order_id: str) -> int:
        return len(self.store.delete(ORDERS_TABLE, {"id": order_id, "paid": False}))
