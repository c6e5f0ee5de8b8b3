"""
Outgoing email delivery.

``SmtpEmailSender`` delivers through an SMTP relay; ``LoggingEmailSender``
only logs, and is used whenever mail is disabled in settings.
"""

import logging
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage as MimeMessage
from typing import Protocol

from fitness_tracker.config import Settings
from fitness_tracker.errors import DispatchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmailMessage:
    """A plain-text email to a single recipient."""

    to_address: str
    subject: str
    content: str


class EmailSender(Protocol):
    """Delivers an email or raises ``DispatchError``."""

    def send(self, message: EmailMessage) -> None: ...


class SmtpEmailSender:
    """Send emails through an SMTP server."""

    def __init__(
        self,
        host: str,
        port: int,
        from_address: str,
        username: str = "",
        password: str = "",
        use_tls: bool = False,
        timeout: float = 10.0,
    ):
        self.host = host
        self.port = port
        self.from_address = from_address
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout

    def send(self, message: EmailMessage) -> None:
        """
        Deliver ``message``.

        Raises:
            DispatchError: If the SMTP conversation fails for any reason
        """
        mime = MimeMessage()
        mime["From"] = self.from_address
        mime["To"] = message.to_address
        mime["Subject"] = message.subject
        mime.set_content(message.content)

        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
                if self.use_tls:
                    smtp.starttls()
                if self.username:
                    smtp.login(self.username, self.password)
                smtp.send_message(mime)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(
                f"Failed to send email to {message.to_address}: {e}",
                extra={"recipient": message.to_address},
            )
            raise DispatchError(
                f"Failed to send email to {message.to_address}: {e}",
                recipient=message.to_address,
            ) from e

        logger.info(f"Email '{message.subject}' sent to {message.to_address}")


class LoggingEmailSender:
    """Log emails instead of sending them."""

    def send(self, message: EmailMessage) -> None:
        logger.info(
            f"Mail disabled, not sending '{message.subject}' to {message.to_address}:\n"
            f"{message.content}",
            extra={"recipient": message.to_address},
        )


def create_email_sender(settings: Settings) -> EmailSender:
    """Pick the sender implementation configured in ``settings``."""
    if not settings.MAIL_ENABLED:
        return LoggingEmailSender()
    return SmtpEmailSender(
        host=settings.MAIL_HOST,
        port=settings.MAIL_PORT,
        from_address=settings.MAIL_FROM,
        username=settings.MAIL_USERNAME,
        password=settings.MAIL_PASSWORD,
        use_tls=settings.MAIL_USE_TLS,
        timeout=settings.MAIL_TIMEOUT_SECONDS,
    )
