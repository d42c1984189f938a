# file: models/notification.py

from pydantic import BaseModel
from typing import Any, Optional


# Field values are passed to FCM as received; the SDK rejects bad ones.
class NotificationRequest(BaseModel):
    token: Optional[Any] = None
    title: Optional[Any] = None
    body: Optional[Any] = None
    data: Optional[Any] = None


class RoleNotificationRequest(BaseModel):
    title: Optional[Any] = None
    body: Optional[Any] = None
    role: Optional[Any] = None
    data: Optional[Any] = None
