from pydantic import BaseModel, Field


class PaymentIntentRequest(BaseModel):
    # Prix en unités principales (ex: 12.5 USD), converti en centimes pour Stripe
    price: float = Field(gt=0)
