# file: models/user.py

from pydantic import BaseModel, ConfigDict
from typing import Optional


class UserRecord(BaseModel):
    """Read-only view of a document in the users collection."""
    rol: Optional[str] = None
    token: Optional[str] = None

    model_config = ConfigDict(extra="ignore")

    @property
    def has_token(self) -> bool:
        return bool(self.token)
