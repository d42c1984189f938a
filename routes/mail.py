# file: routes/mail.py

from fastapi import APIRouter, Depends

from models.mail import MailRequest, MailResult
from services.container import get_mail_service
from services.email_service import MailService
from services.mail_dispatch import send_rejection_mail, send_status_mail
from services.results import Ok, Result, error_detail

router = APIRouter()


def _mail_response(result: Result[MailResult]) -> dict:
    # Mail endpoints always answer 200; failure is reported only through seEnvio.
    if isinstance(result, Ok):
        return {**result.value.model_dump(), "seEnvio": True}
    return {"mensaje": error_detail(result.error), "seEnvio": False}


@router.post("/smend-ail")
def send_status_email(payload: MailRequest, mailer: MailService = Depends(get_mail_service)):
    """Mails the user that their account was accepted, or that it is pending approval."""
    return _mail_response(send_status_mail(mailer, payload))


@router.post("/rechazo-mail")
def send_rejection_email(payload: MailRequest, mailer: MailService = Depends(get_mail_service)):
    """Mails the user that their account was rejected."""
    return _mail_response(send_rejection_mail(mailer, payload))
