"""Tests for email senders."""

import smtplib
from unittest.mock import patch

import pytest

from fitness_tracker.config import Settings
from fitness_tracker.errors import DispatchError
from fitness_tracker.services.email_service import (
    EmailMessage,
    LoggingEmailSender,
    SmtpEmailSender,
    create_email_sender,
)

MESSAGE = EmailMessage(to_address="emma@domain.com", subject="Hello", content="Body")


@pytest.fixture
def smtp_class():
    with patch("fitness_tracker.services.email_service.smtplib.SMTP") as smtp_class:
        yield smtp_class


def test_smtp_sender_sends_message(smtp_class):
    sender = SmtpEmailSender("mail.local", 2525, "noreply@domain.com")

    sender.send(MESSAGE)

    smtp_class.assert_called_once_with("mail.local", 2525, timeout=10.0)
    smtp = smtp_class.return_value.__enter__.return_value
    smtp.starttls.assert_not_called()
    smtp.login.assert_not_called()
    sent = smtp.send_message.call_args.args[0]
    assert sent["To"] == "emma@domain.com"
    assert sent["From"] == "noreply@domain.com"
    assert sent["Subject"] == "Hello"
    assert sent.get_content().strip() == "Body"


def test_smtp_sender_uses_tls_and_login_when_configured(smtp_class):
    sender = SmtpEmailSender(
        "mail.local", 587, "noreply@domain.com", username="user", password="secret", use_tls=True
    )

    sender.send(MESSAGE)

    smtp = smtp_class.return_value.__enter__.return_value
    smtp.starttls.assert_called_once()
    smtp.login.assert_called_once_with("user", "secret")


def test_smtp_failure_raises_dispatch_error(smtp_class):
    smtp = smtp_class.return_value.__enter__.return_value
    smtp.send_message.side_effect = smtplib.SMTPException("rejected")

    with pytest.raises(DispatchError) as exc_info:
        SmtpEmailSender("mail.local", 25, "noreply@domain.com").send(MESSAGE)

    assert exc_info.value.recipient == "emma@domain.com"


def test_connection_failure_raises_dispatch_error(smtp_class):
    smtp_class.side_effect = ConnectionRefusedError()

    with pytest.raises(DispatchError):
        SmtpEmailSender("mail.local", 25, "noreply@domain.com").send(MESSAGE)


def test_logging_sender_only_logs(caplog):
    caplog.set_level("INFO")

    LoggingEmailSender().send(MESSAGE)

    assert "emma@domain.com" in caplog.text


def test_create_email_sender_follows_settings():
    assert isinstance(create_email_sender(Settings(MAIL_ENABLED=False)), LoggingEmailSender)

    sender = create_email_sender(Settings(MAIL_ENABLED=True, MAIL_HOST="smtp.domain.com", MAIL_PORT=587))

    assert isinstance(sender, SmtpEmailSender)
    assert (sender.host, sender.port) == ("smtp.domain.com", 587)
