# file: services/email_service.py

import logging
import smtplib
from email.message import EmailMessage
from email.utils import make_msgid, parseaddr

from models.mail import MailResult
from utils.config import Settings

logger = logging.getLogger(__name__)


class MailService:
    """
    Sends HTML mail through one SMTP account.
    Port 465 uses implicit TLS; any other port upgrades with STARTTLS.
    """

    def __init__(self, host: str, port: int, user: str, password: str, sender: str):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.sender = sender

    @classmethod
    def from_settings(cls, settings: Settings) -> "MailService":
        return cls(
            host=settings.smtp_host,
            port=settings.smtp_port,
            user=settings.mail_user,
            password=settings.mail_password,
            sender=settings.mail_from,
        )

    def _connect(self) -> smtplib.SMTP:
        if self.port == 465:
            return smtplib.SMTP_SSL(self.host, self.port)
        server = smtplib.SMTP(self.host, self.port)
        server.starttls()
        return server

    def send(self, to: str, subject: str, html: str) -> MailResult:
        """Sends one message and reports which recipients the server accepted."""
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = to
        message["Subject"] = subject
        message_id = make_msgid(domain=parseaddr(self.sender)[1].rpartition("@")[2] or None)
        message["Message-ID"] = message_id
        message.set_content(html, subtype="html")

        with self._connect() as server:
            server.login(self.user, self.password)
            refused = server.send_message(message)

        address = parseaddr(to)[1]
        accepted = [address] if address not in refused else []
        logger.info(f"Email '{subject}' sent to {to}")
        return MailResult(
            accepted=accepted,
            rejected=sorted(refused),
            envelope={"from": parseaddr(self.sender)[1], "to": [address]},
            messageId=message_id,
        )
