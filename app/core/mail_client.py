# app/core/mail_client.py
import asyncio
import smtplib
from dataclasses import dataclass
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr
from typing import List, Optional

from app.core.config import settings
from app.core.errors import NotificationFailure
from app.core.logger import logger


@dataclass(frozen=True)
class Recipient:
    email: str
    name: Optional[str] = None


class MailClient:
    """Sends one HTML message to one recipient over SMTP."""

    def __init__(
        self,
        host: Optional[str],
        port: int,
        user: Optional[str],
        password: Optional[str],
        sender_name: str,
        sender_email: str,
        timeout: float = 10.0,
    ):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.sender_name = sender_name
        self.sender_email = sender_email
        self.timeout = timeout

    def build_message(self, recipient: Recipient, subject: str, html: str) -> MIMEMultipart:
        message = MIMEMultipart("alternative")
        message["From"] = formataddr((self.sender_name, self.sender_email))
        message["To"] = formataddr((recipient.name or "", recipient.email))
        message["Subject"] = subject
        message.attach(MIMEText(html, "html"))
        return message

    def _deliver(self, recipient: Recipient, message: MIMEMultipart) -> None:
        with smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout) as server:
            if self.user:
                server.login(self.user, self.password or "")
            server.sendmail(self.sender_email, [recipient.email], message.as_string())

    async def send(self, recipient: Recipient, subject: str, html: str) -> None:
        """Deliver the message, raising NotificationFailure if it could not be sent."""
        try:
            message = self.build_message(recipient, subject, html)
        except ValueError as e:
            # formataddr cannot encode non-ASCII addresses
            raise NotificationFailure(recipient.email, f"cannot build message: {e}") from e
        try:
            await asyncio.to_thread(self._deliver, recipient, message)
        except (smtplib.SMTPException, OSError) as e:
            raise NotificationFailure(recipient.email, str(e)) from e
        logger.info(f"[Mail] Sent '{subject}' to {recipient.email}")


class ConsoleMailClient(MailClient):
    """Logs messages instead of delivering them. Used for local development."""

    def __init__(self, sender_name: str, sender_email: str):
        super().__init__(None, 0, None, None, sender_name, sender_email)
        self.outbox: List[MIMEMultipart] = []

    def _deliver(self, recipient: Recipient, message: MIMEMultipart) -> None:
        self.outbox.append(message)
        logger.info(f"[Mail] (console) To: {message['To']} Subject: {message['Subject']}")


_mail_client: Optional[MailClient] = None


def build_mail_client() -> MailClient:
    if settings.MAIL_BACKEND == "smtp":
        if not settings.SMTP_HOST:
            raise RuntimeError("MAIL_BACKEND is 'smtp' but SMTP_HOST is not set")
        return MailClient(
            host=settings.SMTP_HOST,
            port=settings.SMTP_PORT,
            user=settings.SMTP_USER,
            password=settings.SMTP_PASSWORD,
            sender_name=settings.MAIL_FROM_NAME,
            sender_email=settings.MAIL_FROM_ADDRESS,
            timeout=settings.SMTP_TIMEOUT_SECONDS,
        )
    if settings.MAIL_BACKEND == "console":
        return ConsoleMailClient(settings.MAIL_FROM_NAME, settings.MAIL_FROM_ADDRESS)
    raise RuntimeError(f"Unknown MAIL_BACKEND: {settings.MAIL_BACKEND}")


def init_mail_client() -> MailClient:
    """Create the process-wide mail client (for startup)."""
    global _mail_client

    if _mail_client is None:
        _mail_client = build_mail_client()
        logger.info(f"Mail client initialised with backend '{settings.MAIL_BACKEND}'")

    return _mail_client


def get_mail_client() -> MailClient:
    """FastAPI dependency for the mail client created at startup."""
    if _mail_client is None:
        raise RuntimeError("Mail client is not initialised")
    return _mail_client


def close_mail_client() -> None:
    """Drop the mail client on application shutdown."""
    global _mail_client
    _mail_client = None
