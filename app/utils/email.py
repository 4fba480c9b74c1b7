from contextlib import contextmanager
from typing import Generator
import smtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart

from app.core.config import settings


class EmailSender:
    """Utility class that provides high-level helpers for application e-mails."""

    @staticmethod
    @contextmanager
    def _smtp_connection(timeout: float | None = None) -> Generator[smtplib.SMTP, None, None]:
        """Yields an SMTP connection, upgraded to TLS and logged in when configured.

        ``quit()`` is sent automatically when the block exits.
        """
        smtp = settings.smtp
        kwargs = {"timeout": timeout} if timeout is not None else {}
        with smtplib.SMTP(smtp.smtp_server, smtp.smtp_port, **kwargs) as server:
            if smtp.use_tls:
                server.starttls()
            if smtp.sender_password:
                server.login(smtp.sender_email, smtp.sender_password)
            yield server

    @staticmethod
    def _build_message(recipient: str, subject: str, body: str) -> MIMEMultipart:
        """Composes a plain-text MIME message."""
        msg = MIMEMultipart()
        msg["From"] = settings.smtp.sender_email
        msg["To"] = recipient
        msg["Subject"] = subject
        msg.attach(MIMEText(body.strip(), "plain"))
        return msg

    @classmethod
    def _send(cls, recipient: str, subject: str, body: str, timeout: float | None = None) -> None:
        """Centralised send routine; SMTP errors propagate to the caller."""
        message = cls._build_message(recipient, subject, body)
        with cls._smtp_connection(timeout) as server:
            server.send_message(message)

    @classmethod
    def send_email(
        cls, recipient_email: str, subject: str, body: str, timeout: float | None = None
    ) -> None:
        """Generic helper for ad-hoc plain-text emails."""
        cls._send(recipient_email, subject, body, timeout)
