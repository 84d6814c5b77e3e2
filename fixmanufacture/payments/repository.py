"""
Accès aux données pour la feature 'payments' (table payments, append-only).
"""
from typing import Any, Dict, List
from fixmanufacture.infra.store import DocumentStore

PAYMENTS_TABLE = "payments"


class PaymentsRepository:
    def __init__(self, store: DocumentStore):
        self.store = store

    def insert(self, payment: Dict[str, Any]) -> Dict[str, Any]:
        return self.store.insert(PAYMENTS_TABLE, payment)

    def list_by_transaction(self, transaction_id: str) -> List[Dict[str, Any]]:
        return self.store.find(PAYMENTS_TABLE, {"transactionId": transaction_id})

    def list_by_order(self, order_id: str) -> List[Dict[str, Any]]:
        return self.store.find(PAYMENTS_TABLE, {"orderId": order_id})
