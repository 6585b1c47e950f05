"""
Registration domain service - Signup workflow.

This module contains the core business logic for user registration:
validate the submission, hash the password, issue an activation token,
store the user as inactive and send the activation email.

Uniqueness
==========

Email uniqueness is checked twice:

1. As the last email rule during validation, so that a taken email is
   reported together with the errors of the other fields.
2. By the repository's UNIQUE constraint at insert time. This is the
   authoritative guard; a concurrent registration that slips past (1)
   gets the same "email in use" field error.

Notification
============

The activation email is sent synchronously inside the insert transaction.
If delivery fails, the insert is rolled back and EmailDeliveryFailed
propagates, so a failed request never leaves an unreachable inactive
account behind.
"""

import logging
import secrets
from dataclasses import dataclass

from .exceptions import ValidationFailed
from .messages import translate
from .ports import EmailSender, PasswordHasher, SignupRequest, User, UserRepository
from .validation import validate_signup

logger = logging.getLogger(__name__)


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Orchestrates the registration flow: validation, uniqueness,
    password hashing, token generation, persistence and notification.
    """

    repository: UserRepository
    email_sender: EmailSender
    password_hasher: PasswordHasher
    token_length: int = 16

    def register(self, request: SignupRequest, locale: str) -> User:
        """
        Register a new inactive user and send the activation email.

        Args:
            request: Raw signup input
            locale: Locale key for error messages

        Returns:
            The created user

        Raises:
            ValidationFailed: If any field is invalid or the email is taken
            EmailDeliveryFailed: If the activation email could not be sent
        """
        errors = validate_signup(request, locale, email_in_use=self._email_in_use)
        if errors:
            logger.warning("Signup rejected: invalid fields %s", ", ".join(errors))
            raise ValidationFailed(errors)

        password_hash = self.password_hasher.hash(request.password)
        token = self._generate_activation_token()

        user = self.repository.add_user(
            request.username,
            request.email,
            password_hash,
            token,
            before_commit=self._send_activation,
        )
        if user is None:
            logger.warning("Signup rejected: email claimed concurrently")
            raise ValidationFailed({"email": translate("email_inuse", locale)})

        logger.info("User %s created (inactive)", user.id)
        return user

    def _email_in_use(self, email: str) -> bool:
        return self.repository.find_by_email(email) is not None

    def _send_activation(self, user: User) -> None:
        self.email_sender.send_account_activation(user.email, user.activation_token)

    def _generate_activation_token(self) -> str:
        """
        Generate a cryptographically secure activation token.

        Hex-encoded output of the secrets module, cut to ``token_length``.
        """
        return secrets.token_hex(self.token_length)[: self.token_length]
