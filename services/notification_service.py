# file: services/notification_service.py

import logging
from typing import Iterable, List

from database.db import UserStore
from models.notification import NotificationRequest, RoleNotificationRequest
from models.user import UserRecord
from services.push_service import PushService
from services.results import Err, Ok, Result

logger = logging.getLogger(__name__)


class NoRecipientsError(LookupError):
    """No user with the requested role has a device token."""

    def __init__(self, role):
        super().__init__(f"No users with role {role!r} have a device token")
        self.role = role


def collect_tokens(records: Iterable[UserRecord]) -> List[str]:
    """Device tokens of the records that carry one, in record order."""
    return [record.token for record in records if record.has_token]


def notify_token(push: PushService, request: NotificationRequest) -> Result[str]:
    try:
        message_id = push.send_to_token(request.token, request.title, request.body, request.data)
    except Exception as e:
        logger.error(f"Error sending notification: {str(e)}")
        return Err(e)
    return Ok(message_id)


def notify_role(store: UserStore, push: PushService, request: RoleNotificationRequest) -> Result[int]:
    """
    Sends one notification to every device registered by users of a role.

    The store read always happens first; the push is a single multicast
    call and the result carries only the provider's success count.
    An empty audience yields Err(NoRecipientsError).
    """
    try:
        tokens = collect_tokens(store.find_by_role(request.role))
        if not tokens:
            logger.warning(f"No recipients for role {request.role!r}")
            return Err(NoRecipientsError(request.role))
        response = push.send_multicast(tokens, request.title, request.body, request.data)
    except Exception as e:
        logger.error(f"Error sending role notification: {str(e)}")
        return Err(e)
    return Ok(response.success_count)
