"""
Console email sender adapter - Implements EmailSender protocol.

This module provides a console-based implementation of the domain's
email sender port, logging activation tokens for local development.
"""

import logging

logger = logging.getLogger(__name__)


class ConsoleEmailSender:
    """
    Implements EmailSender protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    For demo/development purposes - prints activation tokens to the log.
    """

    def send_account_activation(self, email: str, token: str) -> None:
        """
        Log activation token to console (simulates email delivery).

        Args:
            email: Recipient email address
            token: Activation token
        """
        logger.info("[ACTIVATION] Email: %s Token: %s", email, token)
