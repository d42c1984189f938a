# file: services/mail_dispatch.py

import logging

from models.mail import MailRequest, MailResult
from services.email_service import MailService
from services.mail_templates import render_rejection_mail, render_status_mail
from services.results import Err, Ok, Result

logger = logging.getLogger(__name__)


def _send(mailer: MailService, to, subject: str, html: str) -> Result[MailResult]:
    try:
        return Ok(mailer.send(to, subject, html))
    except Exception as e:
        logger.error(f"Error sending email to {to}: {e}")
        return Err(e)


def send_status_mail(mailer: MailService, request: MailRequest) -> Result[MailResult]:
    """Accepted mail when `aceptacion` is true, pending-approval mail otherwise."""
    subject, html = render_status_mail(request.aceptacion, request.nombreUsuario)
    return _send(mailer, request.mail, subject, html)


def send_rejection_mail(mailer: MailService, request: MailRequest) -> Result[MailResult]:
    subject, html = render_rejection_mail(request.nombreUsuario)
    return _send(mailer, request.mail, subject, html)
