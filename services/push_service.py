# file: services/push_service.py

import logging
from typing import Dict, List, Optional

import firebase_admin
from firebase_admin import messaging

logger = logging.getLogger(__name__)


class PushService:
    """Thin wrapper over Firebase Cloud Messaging bound to one Firebase app."""

    def __init__(self, app: Optional[firebase_admin.App] = None):
        self._app = app

    def send_to_token(self, token: str, title: str, body: str, data: Optional[Dict[str, str]] = None) -> str:
        """Sends one message to a single device token and returns the provider's message id."""
        message = messaging.Message(
            token=token,
            notification=messaging.Notification(title=title, body=body),
            data=data or None,
        )
        message_id = messaging.send(message, app=self._app)
        logger.info(f"Notification sent: {message_id}")
        return message_id

    def send_multicast(
            self,
            tokens: List[str],
            title: str,
            body: str,
            data: Optional[Dict[str, str]] = None,
    ) -> messaging.BatchResponse:
        """Sends one message to every token in a single batched call."""
        message = messaging.MulticastMessage(
            tokens=tokens,
            notification=messaging.Notification(title=title, body=body),
            data=data or None,
        )
        response = messaging.send_each_for_multicast(message, app=self._app)
        if response.failure_count:
            logger.warning(
                f"Multicast partially failed: {response.success_count} sent, {response.failure_count} failed"
            )
        else:
            logger.info(f"Multicast sent to {response.success_count} devices")
        return response
