"""
Domain layer - Pure business logic with no web or database imports.

This package contains the core business logic for user signup:
field validation, localized messages and the registration workflow.
It defines its own port interfaces for infrastructure abstraction.
"""

from .exceptions import EmailDeliveryFailed, RegistrationError, ValidationFailed
from .messages import DEFAULT_LOCALE, MESSAGES, resolve_locale, translate
from .ports import EmailSender, PasswordHasher, SignupRequest, User, UserRepository
from .registration import RegistrationService
from .validation import validate_signup

__all__ = [
    "DEFAULT_LOCALE",
    "EmailDeliveryFailed",
    "EmailSender",
    "MESSAGES",
    "PasswordHasher",
    "RegistrationError",
    "RegistrationService",
    "SignupRequest",
    "User",
    "UserRepository",
    "ValidationFailed",
    "resolve_locale",
    "translate",
    "validate_signup",
]
