"""
Exceptions métier du backend.
- Jetons: InvalidToken et ses variantes (internes au service de jetons, réduites à 403 par le guard).
- Commandes: OrderAlreadyPaid, TransactionAlreadyUsed, PaidOrderDeletionBlocked (409).
- Réconciliation: PaymentReconciliationError, paiement enregistré mais commande non mise à jour (500).
"""
from typing import Optional


class InvalidToken(Exception):
    """Jeton refusé (toutes causes confondues)."""


class TokenExpired(InvalidToken):
    pass


class TokenMalformed(InvalidToken):
    pass


class TokenSignatureInvalid(InvalidToken):
    pass


class OrderAlreadyPaid(Exception):
    def __init__(self, order_id: str):
        super().__init__(f"Order {order_id} is already paid")
        self.order_id = order_id


class TransactionAlreadyUsed(Exception):
    """Un transactionId ne peut régler qu'une seule commande."""

    def __init__(self, transaction_id: str):
        super().__init__(f"Transaction {transaction_id} already recorded")
        self.transaction_id = transaction_id


class PaidOrderDeletionBlocked(Exception):
    def __init__(self, order_id: str):
        super().__init__(f"Order {order_id} is paid and cannot be deleted")
        self.order_id = order_id


class PaymentReconciliationError(Exception):
    """
    Le paiement a été écrit mais la commande n'a pas pu passer à paid=true.
    Le paiement orphelin reste en base: aucune compensation ni retry.
    """

    def __init__(self, order_id: str, payment_id: Optional[str], reason: str):
        super().__init__(f"Payment {payment_id} recorded but order {order_id} not updated: {reason}")
        self.order_id = order_id
        self.payment_id = payment_id
        self.reason = reason
