"""
SMTP email sender adapter - Implements EmailSender protocol.

Sends the account activation email through an SMTP relay using the
standard library smtplib client. Transport errors are wrapped in the
domain's EmailDeliveryFailed so callers never see smtplib types.
"""

import logging
import smtplib
from email.message import EmailMessage

from signup.domain.exceptions import EmailDeliveryFailed

logger = logging.getLogger(__name__)

ACTIVATION_SUBJECT = "Account Activation"


def build_activation_message(sender: str, recipient: str, token: str) -> EmailMessage:
    """Build the activation email; the token appears verbatim in both bodies."""
    message = EmailMessage()
    message["Subject"] = ACTIVATION_SUBJECT
    message["From"] = sender
    message["To"] = recipient
    message.set_content(f"Your activation token is: {token}\n")
    message.add_alternative(
        f"<div><b>Please use the token below to activate your account</b></div>"
        f"<div>Token is {token}</div>",
        subtype="html",
    )
    return message


class SmtpEmailSender:
    """
    Implements EmailSender protocol via SMTP.

    Opens one connection per message; registration volume does not
    justify connection reuse.
    """

    def __init__(
        self,
        host: str,
        port: int,
        sender: str,
        username: str | None = None,
        password: str | None = None,
        starttls: bool = True,
        timeout: float = 10.0,
    ) -> None:
        self._host = host
        self._port = port
        self._sender = sender
        self._username = username
        self._password = password
        self._starttls = starttls
        self._timeout = timeout

    def send_account_activation(self, email: str, token: str) -> None:
        """
        Send the activation email.

        Raises:
            EmailDeliveryFailed: On any SMTP or socket error
        """
        message = build_activation_message(self._sender, email, token)
        try:
            with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as smtp:
                if self._starttls:
                    smtp.starttls()
                if self._username:
                    smtp.login(self._username, self._password or "")
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            logger.error("Activation email to %s failed: %s", email, e)
            raise EmailDeliveryFailed(email) from e

        logger.info("Activation email sent to %s", email)
