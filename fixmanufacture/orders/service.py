"""Couche service des commandes: réconciliation commande/paiement.
Cycle de vie d'une commande: Created(paid=false) -> PaymentRecorded -> Paid, sans retour arrière.
- place_order: insère la commande non payée (paid/transactionId imposés par le serveur).
- confirm_payment: un transactionId ne règle qu'une commande; écrit d'abord le paiement, puis passe la commande à paid=true.
  Les deux écritures ne sont pas atomiques entre elles: si la seconde échoue, le paiement orphelin
  reste en base et l'incohérence est signalée via PaymentReconciliationError (pas de compensation, pas de retry).
- delete_order: suppression selon OrderDeletePolicy.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional
import logging

from fixmanufacture.errors import (
    OrderAlreadyPaid,
    PaidOrderDeletionBlocked,
    PaymentReconciliationError,
    TransactionAlreadyUsed,
)
from fixmanufacture.orders.repository import OrdersRepository
from fixmanufacture.payments.repository import PaymentsRepository

logger = logging.getLogger(__name__)


class OrderDeletePolicy(str, Enum):
    ALLOW = "allow"
    BLOCK_PAID = "block-paid"

    @classmethod
    def parse(cls, raw: Optional[str]) -> "OrderDeletePolicy":
        try:
            return cls((raw or cls.ALLOW.value).strip().lower())
        except ValueError:
            raise RuntimeError(f"ORDER_DELETE_POLICY invalide: {raw!r} (attendu: allow, block-paid)")


class OrderReconciler:
    def __init__(
        self,
        orders: OrdersRepository,
        payments: PaymentsRepository,
        delete_policy: OrderDeletePolicy = OrderDeletePolicy.ALLOW,
    ):
        self.orders = orders
        self.payments = payments
        self.delete_policy = delete_policy

    def place_order(self, draft: Dict[str, Any]) -> str:
        order = {k: v for k, v in (draft or {}).items() if k not in ("id", "paid", "transactionId")}
        order["paid"] = False
        order["transactionId"] = None
        created = self.orders.insert(order)
        logger.info("Order placed id=%s email=%s", created.get("id"), created.get("email"))
        return str(created.get("id"))

    def get_order(self, order_id: str) -> Optional[Dict[str, Any]]:
        return self.orders.get(order_id)

    def list_orders(self, email: str) -> List[Dict[str, Any]]:
        return self.orders.list_by_email(email)

    def list_all_orders(self) -> List[Dict[str, Any]]:
        return self.orders.list_all()

    def confirm_payment(self, order_id: str, payment: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Enregistre le paiement puis marque la commande payée.
        - Commande absente: None, rien n'est écrit.
        - Commande déjà payée: OrderAlreadyPaid, rien n'est écrit.
        - transactionId déjà enregistré: TransactionAlreadyUsed, rien n'est écrit.
        - Échec (ou aucun match) de la mise à jour de la commande: PaymentReconciliationError.
        """
        transaction_id = payment["transactionId"]
        order = self.orders.get(order_id)
        if order is None:
            return None
        if order.get("paid"):
            raise OrderAlreadyPaid(order_id)
        if self.payments.list_by_transaction(transaction_id):
            logger.warning("Transaction %s already recorded, order %s left unpaid", transaction_id, order_id)
            raise TransactionAlreadyUsed(transaction_id)

        # id et created_at sont attribués par le serveur
        record = {k: v for k, v in payment.items() if k not in ("id", "created_at")}
        record["orderId"] = order_id
        record["created_at"] = datetime.now(timezone.utc).isoformat()
        recorded = self.payments.insert(record)
        payment_id = recorded.get("id")
        logger.info("Payment recorded id=%s order=%s transaction=%s", payment_id, order_id, transaction_id)

        try:
            updated = self.orders.mark_paid(order_id, transaction_id)
        except Exception as e:
            logger.error("Orphan payment id=%s: order %s update failed: %s", payment_id, order_id, e)
            raise PaymentReconciliationError(order_id, payment_id, str(e)) from e
        if updated is None:
            logger.error("Orphan payment id=%s: order %s no longer unpaid", payment_id, order_id)
            raise PaymentReconciliationError(order_id, payment_id, "order not found or already paid")
        return updated

    def delete_order(self, order_id: str) -> int:
        if self.delete_policy == OrderDeletePolicy.BLOCK_PAID:
            # suppression conditionnée sur paid=false, comme mark_paid
            deleted = self.orders.delete_unpaid(order_id)
            if deleted == 0 and self.orders.get(order_id) is not None:
                raise PaidOrderDeletionBlocked(order_id)
            return deleted

        order = self.orders.get(order_id)
        if order and order.get("paid"):
            linked = self.payments.list_by_order(order_id)
            logger.warning("Deleting paid order id=%s (%d linked payment(s) kept)", order_id, len(linked))
        return self.orders.delete(order_id)
