"""
Domain exceptions - Semantic error types for registration.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class ValidationFailed(RegistrationError):
    """
    One or more signup fields violated a rule.

    ``errors`` maps field name to a localized message, ordered
    username, email, password. Uniqueness violations are reported
    here as well, under the ``email`` field.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__(", ".join(errors))
        self.errors = errors


class EmailDeliveryFailed(RegistrationError):
    """The activation email could not be handed to the mail transport."""

    pass
