# module fixmanufacture.orders.views

"""Endpoints des commandes.
- POST /orders: passer une commande (ouvert; le client fournit son email dans le corps).
- GET /orders?email=: commandes d'un utilisateur (require_owner: email du jeton == email demandé).
- GET /orders/{id}: une commande (require_user).
- PATCH /orders/{id}: confirmation de paiement (require_user) -> paiement enregistré puis commande payée.
- DELETE /orders/{id}: suppression (require_user), soumise à ORDER_DELETE_POLICY.
- GET /all-orders: toutes les commandes (require_admin).
Les erreurs métier (OrderAlreadyPaid, PaymentReconciliationError, ...) sont traduites par les handlers globaux.
"""
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends, Query

from fixmanufacture.auth.dependencies import require_admin, require_owner, require_user
from fixmanufacture.auth.tokens import TokenClaims
from fixmanufacture.dependencies import get_reconciler
from fixmanufacture.orders.models import OrderDraft, PaymentDetails
from fixmanufacture.orders.service import OrderReconciler

router = APIRouter(tags=["Orders"])


@router.post("/orders")
def place_order(body: OrderDraft, reconciler: OrderReconciler = Depends(get_reconciler)):
    order_id = reconciler.place_order(body.model_dump())
    return {"insertedId": order_id}


@router.get("/orders")
def list_user_orders(
    email: Optional[str] = Query(default=None),
    owner: TokenClaims = Depends(require_owner),
    reconciler: OrderReconciler = Depends(get_reconciler),
) -> List[Dict[str, Any]]:
    # require_owner a déjà vérifié que ?email= correspond au jeton
    return reconciler.list_orders(owner.email)


@router.get("/orders/{order_id}")
def get_order(
    order_id: str,
    user: TokenClaims = Depends(require_user),
    reconciler: OrderReconciler = Depends(get_reconciler),
) -> Optional[Dict[str, Any]]:
    return reconciler.get_order(order_id)


@router.patch("/orders/{order_id}")
def confirm_payment(
    order_id: str,
    body: PaymentDetails,
    user: TokenClaims = Depends(require_user),
    reconciler: OrderReconciler = Depends(get_reconciler),
) -> Optional[Dict[str, Any]]:
    return reconciler.confirm_payment(order_id, body.model_dump(exclude_none=True))


@router.delete("/orders/{order_id}")
def delete_order(
    order_id: str,
    user: TokenClaims = Depends(require_user),
    reconciler: OrderReconciler = Depends(get_reconciler),
):
    return {"deletedCount": reconciler.delete_order(order_id)}


@router.get("/all-orders")
def list_all_orders(
    admin: TokenClaims = Depends(require_admin),
    reconciler: OrderReconciler = Depends(get_reconciler),
) -> List[Dict[str, Any]]:
    return reconciler.list_all_orders()
