"""
Adaptateur Stripe: centralise les appels et la configuration Stripe.
"""
import stripe
from fixmanufacture.config import STRIPE_SECRET_KEY, PAYMENT_CURRENCY

# module fixmanufacture.payments.stripe_client
def require_stripe():
    """
    Prépare et retourne le module stripe prêt à l’emploi.
    - Configure stripe.api_key via STRIPE_SECRET_KEY si disponible.
    - En absence de clé, les appels Stripe échoueront côté SDK (ex: No API key provided).
    """
    if STRIPE_SECRET_KEY:
        stripe.api_key = STRIPE_SECRET_KEY
    return stripe

def to_minor_units(price: float) -> int:
    """Convertit un prix (unités principales) en centimes entiers."""
    return int(round(float(price) * 100))

def create_payment_intent(amount: int, currency: str = PAYMENT_CURRENCY) -> str:
    """
    Crée un PaymentIntent Stripe et retourne son client_secret.
    - amount: montant en centimes
    - currency: devise ISO (ex: "usd")
    """
    require_stripe()
    intent = stripe.PaymentIntent.create(
        amount=amount,
        currency=currency,
        payment_method_types=["card"],
    )
    return intent["client_secret"]
