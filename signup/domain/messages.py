"""
Localized messages - Locale-keyed message tables and locale resolution.

Message text lives here as data; validation rules only refer to keys.
Tables are built once at import and exposed read-only.
"""

from collections.abc import Mapping
from types import MappingProxyType

DEFAULT_LOCALE = "en"

_EN = {
    "username_null": "Username cannot be null",
    "username_size": "Username must be min 4 and max 32 characters long",
    "email_null": "Email cannot be null",
    "email_invalid": "Email is not valid",
    "email_inuse": "Email already in use",
    "password_null": "Password cannot be null",
    "password_pattern": "Password must contain 1 uppercase letter, 1 lowercase letter and 1 number",
    "password_size": "Password must be at least 6 characters long",
    "user_create_success": "User created",
    "validation_failure": "Validation Failure",
    "email_failure": "E-mail Failure",
}

_TR = {
    "username_null": "Kullanıcı adı boş olamaz",
    "username_size": "Kullanıcı adı en az 4 en fazla 32 karakter olmalı",
    "email_null": "E-posta boş olamaz",
    "email_invalid": "E-posta geçerli değil",
    "email_inuse": "Bu e-posta kullanılıyor",
    "password_null": "Şifre boş olamaz",
    "password_pattern": "Şifrede en az 1 büyük harf, 1 küçük harf ve 1 sayı bulunmalı",
    "password_size": "Şifre en az 6 karakter olmalı",
    "user_create_success": "Kullanıcı oluşturuldu",
    "validation_failure": "Doğrulama hatası",
    "email_failure": "E-posta gönderilemedi",
}

MESSAGES: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "en": MappingProxyType(_EN),
        "tr": MappingProxyType(_TR),
    }
)

SUPPORTED_LOCALES = frozenset(MESSAGES)


def translate(key: str, locale: str) -> str:
    """
    Look up message ``key`` for ``locale``.

    Unknown locales use the default table.

    Raises:
        KeyError: If ``key`` is not a known message key
    """
    table = MESSAGES.get(locale, MESSAGES[DEFAULT_LOCALE])
    return table[key]


def resolve_locale(accept_language: str | None, default: str = DEFAULT_LOCALE) -> str:
    """
    Pick a supported locale from an Accept-Language header value.

    Language ranges are tried in descending ``q`` order (header order on
    ties); only the primary subtag is compared, so ``tr-TR`` selects ``tr``.
    Missing, malformed or unsupported hints yield ``default``.

    Args:
        accept_language: Raw header value, e.g. ``"tr-TR,tr;q=0.9,en;q=0.8"``
        default: Locale returned when nothing matches

    Returns:
        A key of MESSAGES
    """
    if default not in SUPPORTED_LOCALES:
        default = DEFAULT_LOCALE
    if not accept_language:
        return default

    candidates: list[tuple[float, str]] = []
    for part in accept_language.split(","):
        tag, *params = (piece.strip() for piece in part.split(";"))
        if not tag or tag == "*":
            continue
        weight = 1.0
        for param in params:
            name, _, value = param.partition("=")
            if name.strip().lower() == "q":
                try:
                    weight = float(value)
                except ValueError:
                    weight = 0.0
        if weight > 0:
            candidates.append((weight, tag.split("-")[0].lower()))

    # sorted() is stable, so equal weights keep header order
    for _, language in sorted(candidates, key=lambda item: -item[0]):
        if language in SUPPORTED_LOCALES:
            return language
    return default
