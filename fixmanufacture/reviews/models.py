from typing import Optional
from pydantic import BaseModel, ConfigDict


class ReviewIn(BaseModel):
    # Les champs auteur varient selon le front: on conserve tout
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    email: Optional[str] = None
    text: Optional[str] = None
    rating: Optional[float] = None
