# file: routes/notification.py

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from database.db import UserStore
from models.notification import NotificationRequest, RoleNotificationRequest
from services.container import get_push_service, get_user_store
from services.notification_service import NoRecipientsError, notify_role, notify_token
from services.push_service import PushService
from services.results import Ok

router = APIRouter()


@router.post("/notify", response_class=PlainTextResponse)
def send_notification(
        payload: NotificationRequest,
        push: PushService = Depends(get_push_service),
):
    """Sends a notification to a single device token."""
    result = notify_token(push, payload)
    if isinstance(result, Ok):
        return PlainTextResponse(f"Mensaje enviado correctamente: {result.value}")
    return PlainTextResponse(
        f"Error al enviar el mensaje: {result.error}",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


@router.post("/notify-role", response_class=PlainTextResponse)
def send_role_notification(
        payload: RoleNotificationRequest,
        store: UserStore = Depends(get_user_store),
        push: PushService = Depends(get_push_service),
):
    """Sends a notification to every user with the given role that has a device token."""
    result = notify_role(store, push, payload)
    if isinstance(result, Ok):
        return PlainTextResponse(f"Mensajes enviados: {result.value}")
    if isinstance(result.error, NoRecipientsError):
        return PlainTextResponse(
            "No hay usuarios a los que enviar un mensaje",
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return PlainTextResponse(
        f"Error al enviar mensaje: {result.error}",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
