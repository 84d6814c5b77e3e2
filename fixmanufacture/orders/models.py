# module fixmanufacture.orders.models
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class OrderDraft(BaseModel):
    """Commande soumise par le client (champs libres conservés tels quels)."""
    model_config = ConfigDict(extra="allow")

    email: str
    items: Optional[List[Any]] = None


class PaymentDetails(BaseModel):
    model_config = ConfigDict(extra="allow")

    transactionId: str = Field(min_length=1)
    amount: Optional[float] = None
