from typing import Optional
from pydantic import BaseModel, ConfigDict


class UserProfile(BaseModel):
    """Profil envoyé à PUT /users/{email}; un éventuel champ role est ignoré à l'écriture."""
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
