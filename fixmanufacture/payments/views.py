# module fixmanufacture.payments.views

"""Endpoint de paiement.
- POST /create-payment-intent: crée un PaymentIntent Stripe pour un prix et renvoie son client_secret.
Sécurité: require_user + optional_rate_limit.
"""
from fastapi import APIRouter, Depends
import logging

from fixmanufacture.auth.dependencies import require_user
from fixmanufacture.auth.tokens import TokenClaims
from fixmanufacture.payments import stripe_client
from fixmanufacture.payments.models import PaymentIntentRequest
from fixmanufacture.utils.rate_limit import optional_rate_limit

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Payments"])


@router.post("/create-payment-intent", dependencies=[Depends(optional_rate_limit(times=10, seconds=60))])
def create_payment_intent(body: PaymentIntentRequest, user: TokenClaims = Depends(require_user)):
    amount = stripe_client.to_minor_units(body.price)
    client_secret = stripe_client.create_payment_intent(amount)
    logger.info("Payment intent created for %s (amount=%d)", user.email, amount)
    return {"clientSecret": client_secret}
