"""
Signup validation - Field rules for registration input.

Each field is checked independently and all fields are always checked.
Per field, the first failing rule decides the message. The result keeps
the fixed field order: username, email, password.
"""

import re
from collections.abc import Callable

from email_validator import EmailNotValidError, validate_email

from .messages import translate
from .ports import SignupRequest

USERNAME_MIN_LENGTH = 4
USERNAME_MAX_LENGTH = 32
PASSWORD_MIN_LENGTH = 6

_PASSWORD_PATTERN = re.compile(r"(?=.*[a-z])(?=.*[A-Z])(?=.*\d)", re.ASCII | re.DOTALL)


def _check_username(value: object) -> str | None:
    if value is None:
        return "username_null"
    if not isinstance(value, str):
        return "username_size"
    if not USERNAME_MIN_LENGTH <= len(value) <= USERNAME_MAX_LENGTH:
        return "username_size"
    return None


def _is_email(value: str) -> bool:
    # Syntax only: local@domain.tld, no DNS lookup. Special-use domains
    # such as .local or .test are accepted.
    _, at, domain = value.rpartition("@")
    if not at or "." not in domain:
        return False
    try:
        validate_email(value, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        return False
    return True


def _check_email(value: object, email_in_use: Callable[[str], bool] | None) -> str | None:
    if value is None:
        return "email_null"
    if not isinstance(value, str) or not _is_email(value):
        return "email_invalid"
    if email_in_use is not None and email_in_use(value):
        return "email_inuse"
    return None


def _check_password(value: object) -> str | None:
    if value is None:
        return "password_null"
    if not isinstance(value, str) or not _PASSWORD_PATTERN.match(value):
        return "password_pattern"
    if len(value) < PASSWORD_MIN_LENGTH:
        return "password_size"
    return None


def validate_signup(
    request: SignupRequest,
    locale: str,
    email_in_use: Callable[[str], bool] | None = None,
) -> dict[str, str]:
    """
    Validate a signup request.

    Args:
        request: Raw signup input
        locale: Locale key used to pick message text
        email_in_use: Optional lookup telling whether an email is already
            registered. Only consulted once the email passes its format rules.

    Returns:
        Mapping of field name to localized message, empty when valid.
        Keys appear in the order username, email, password.
    """
    failures = {
        "username": _check_username(request.username),
        "email": _check_email(request.email, email_in_use),
        "password": _check_password(request.password),
    }
    return {field: translate(key, locale) for field, key in failures.items() if key is not None}
