# file: models/mail.py

from pydantic import BaseModel
from typing import Any, Optional, List, Dict


class MailRequest(BaseModel):
    aceptacion: Optional[Any] = False
    nombreUsuario: Optional[Any] = None
    mail: Optional[Any] = None


class MailResult(BaseModel):
    """What the SMTP transport reports after a send."""
    accepted: List[str]
    rejected: List[str]
    envelope: Dict[str, object]
    messageId: str
