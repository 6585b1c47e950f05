"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class SignupRequest:
    """
    Raw signup submission.

    Every field may be missing (None) or of an unexpected type;
    checking that is the validator's job.
    """

    username: Any = None
    email: Any = None
    password: Any = None


@dataclass(frozen=True)
class User:
    """
    Persisted user account.

    ``password`` always holds the hash, never the submitted value.
    ``inactive`` stays True until the account is activated elsewhere.
    """

    id: int
    username: str
    email: str
    password: str
    activation_token: str | None
    inactive: bool = True


class UserRepository(Protocol):
    """Port interface for user persistence."""

    def find_by_email(self, email: str) -> User | None:
        """
        Look up a user by exact (case-sensitive) email.

        Args:
            email: Email address as submitted

        Returns:
            The stored user, or None if no user has this email
        """
        ...

    def add_user(
        self,
        username: str,
        email: str,
        password_hash: str,
        activation_token: str,
        before_commit: Callable[[User], None] | None = None,
    ) -> User | None:
        """
        Insert a new inactive user.

        The store enforces email uniqueness itself, so a concurrent
        registration for the same email is rejected atomically.

        ``before_commit`` runs inside the insert transaction once the row
        exists. If it raises, the insert is rolled back and the exception
        propagates.

        Args:
            username: Validated username
            email: Validated email address
            password_hash: Output of a PasswordHasher
            activation_token: Random activation token
            before_commit: Optional hook run before the transaction commits

        Returns:
            The created user, or None if the email is already taken
        """
        ...


class PasswordHasher(Protocol):
    """Port interface for one-way password hashing."""

    def hash(self, plaintext: str) -> str:
        """Return a salted, irreversible hash of ``plaintext``."""
        ...


class EmailSender(Protocol):
    """Port interface for email delivery."""

    def send_account_activation(self, email: str, token: str) -> None:
        """
        Send the account activation email.

        The token must appear verbatim in the message content.

        Args:
            email: Recipient email address
            token: Activation token issued at registration

        Raises:
            EmailDeliveryFailed: If the transport rejects the message
        """
        ...
