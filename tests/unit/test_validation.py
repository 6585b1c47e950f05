"""
Unit tests for signup field validation.

Tests verify:
- Per-field rules and their precedence
- All fields are reported together, in field order
- The email uniqueness lookup runs only for well-formed emails
"""

from unittest.mock import Mock

import pytest

from signup.domain.ports import SignupRequest
from signup.domain.validation import validate_signup

USERNAME_NULL = "Username cannot be null"
USERNAME_SIZE = "Username must be min 4 and max 32 characters long"
EMAIL_NULL = "Email cannot be null"
EMAIL_INVALID = "Email is not valid"
EMAIL_INUSE = "Email already in use"
PASSWORD_NULL = "Password cannot be null"
PASSWORD_PATTERN = "Password must contain 1 uppercase letter, 1 lowercase letter and 1 number"
PASSWORD_SIZE = "Password must be at least 6 characters long"


def make_request(**overrides: object) -> SignupRequest:
    fields = {"username": "user1", "email": "user1@mail.com", "password": "P4ssword"}
    fields.update(overrides)
    return SignupRequest(**fields)


class TestValidInput:
    """Tests for submissions that pass every rule."""

    def test_valid_request_has_no_errors(self) -> None:
        assert validate_signup(make_request(), "en") == {}

    @pytest.mark.parametrize("username", ["abcd", "a" * 32])
    def test_username_length_bounds_are_inclusive(self, username: str) -> None:
        assert validate_signup(make_request(username=username), "en") == {}

    def test_password_exactly_six_chars(self) -> None:
        assert validate_signup(make_request(password="Abcde1"), "en") == {}

    def test_long_password_has_no_upper_bound(self) -> None:
        assert validate_signup(make_request(password="Aa1" + "x" * 80), "en") == {}

    @pytest.mark.parametrize(
        "email",
        [
            "user@host.local",
            "user@site.test",
            "a@b.localhost",
            "user@mail.invalid",
            "u@ex.onion",
            "x@y.z",
        ],
    )
    def test_special_use_domains_are_valid(self, email: str) -> None:
        assert validate_signup(make_request(email=email), "en") == {}

    @pytest.mark.parametrize("email", ["user@mail", "user@localhost", "@mail.com"])
    def test_domain_must_contain_a_dot(self, email: str) -> None:
        errors = validate_signup(make_request(email=email), "en")
        assert errors == {"email": EMAIL_INVALID}


class TestFieldRules:
    """Tests for the first failing rule of each field."""

    @pytest.mark.parametrize(
        ("field", "value", "expected"),
        [
            ("username", None, USERNAME_NULL),
            ("username", "usr", USERNAME_SIZE),
            ("username", "a" * 33, USERNAME_SIZE),
            ("email", None, EMAIL_NULL),
            ("email", "mail.com", EMAIL_INVALID),
            ("email", "user.mail.com", EMAIL_INVALID),
            ("email", "user@mail", EMAIL_INVALID),
            ("password", None, PASSWORD_NULL),
            ("password", "aaaaaaaa", PASSWORD_PATTERN),
            ("password", "BBBBBBB", PASSWORD_PATTERN),
            ("password", "b1sasss", PASSWORD_PATTERN),
            ("password", "B2BBBBBB", PASSWORD_PATTERN),
            ("password", "B2Ba", PASSWORD_SIZE),
        ],
    )
    def test_rule_message(self, field: str, value: object, expected: str) -> None:
        errors = validate_signup(make_request(**{field: value}), "en")
        assert errors == {field: expected}

    def test_short_lowercase_password_reports_pattern_not_length(self) -> None:
        """Pattern is checked before length."""
        errors = validate_signup(make_request(password="abc"), "en")
        assert errors == {"password": PASSWORD_PATTERN}

    @pytest.mark.parametrize(
        ("field", "value", "expected"),
        [
            ("username", 12345, USERNAME_SIZE),
            ("email", ["user1@mail.com"], EMAIL_INVALID),
            ("password", 123456, PASSWORD_PATTERN),
        ],
    )
    def test_non_string_values_fail_without_raising(
        self, field: str, value: object, expected: str
    ) -> None:
        errors = validate_signup(make_request(**{field: value}), "en")
        assert errors == {field: expected}


class TestMultipleFields:
    """Tests for reporting several failing fields at once."""

    def test_all_fields_missing(self) -> None:
        errors = validate_signup(SignupRequest(), "en")
        assert errors == {
            "username": USERNAME_NULL,
            "email": EMAIL_NULL,
            "password": PASSWORD_NULL,
        }
        assert list(errors) == ["username", "email", "password"]

    def test_username_and_email_null_keep_field_order(self) -> None:
        errors = validate_signup(make_request(username=None, email=None), "en")
        assert list(errors) == ["username", "email"]


class TestEmailInUse:
    """Tests for the uniqueness rule on the email field."""

    def test_email_in_use_reported(self) -> None:
        lookup = Mock(return_value=True)
        errors = validate_signup(make_request(), "en", email_in_use=lookup)
        assert errors == {"email": EMAIL_INUSE}
        lookup.assert_called_once_with("user1@mail.com")

    def test_email_in_use_reported_with_other_field_errors(self) -> None:
        errors = validate_signup(
            make_request(username=None), "en", email_in_use=Mock(return_value=True)
        )
        assert errors == {"username": USERNAME_NULL, "email": EMAIL_INUSE}
        assert list(errors) == ["username", "email"]

    def test_lookup_skipped_for_malformed_email(self) -> None:
        lookup = Mock(return_value=True)
        errors = validate_signup(make_request(email="user@mail"), "en", email_in_use=lookup)
        assert errors == {"email": EMAIL_INVALID}
        lookup.assert_not_called()

    def test_unused_email_passes(self) -> None:
        errors = validate_signup(make_request(), "en", email_in_use=Mock(return_value=False))
        assert errors == {}


class TestLocalizedMessages:
    """Tests for message selection by locale."""

    def test_turkish_messages_differ_from_english(self) -> None:
        request = make_request(username=None)
        english = validate_signup(request, "en")
        turkish = validate_signup(request, "tr")
        assert english["username"] == USERNAME_NULL
        assert turkish["username"] == "Kullanıcı adı boş olamaz"

    def test_unknown_locale_uses_english(self) -> None:
        errors = validate_signup(make_request(username="usr"), "xx")
        assert errors == {"username": USERNAME_SIZE}
