from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class PartIn(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    price: float = Field(ge=0)
    available_quantity: int = Field(default=0, ge=0)
    description: Optional[str] = None


class QuantityUpdate(BaseModel):
    quantity: int = Field(ge=0)
