"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from functools import lru_cache

from fastapi import Header, Request
from psycopg_pool import ConnectionPool

from signup.adapters.hashing import BcryptPasswordHasher
from signup.adapters.repository.postgres import PostgresUserRepository
from signup.adapters.smtp import ConsoleEmailSender, SmtpEmailSender
from signup.config.settings import get_settings
from signup.domain.messages import resolve_locale
from signup.domain.ports import EmailSender
from signup.domain.registration import RegistrationService


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresUserRepository:
    """Create repository with connection pool from app state."""
    pool = get_pool(request)
    return PostgresUserRepository(pool)


@lru_cache
def get_email_sender() -> EmailSender:
    """Get the configured email sender (singleton)."""
    settings = get_settings()
    if settings.email_backend == "smtp":
        return SmtpEmailSender(
            host=settings.smtp_host,
            port=settings.smtp_port,
            sender=settings.mail_from,
            username=settings.smtp_username,
            password=settings.smtp_password,
            starttls=settings.smtp_starttls,
            timeout=settings.smtp_timeout,
        )
    return ConsoleEmailSender()


@lru_cache
def get_password_hasher() -> BcryptPasswordHasher:
    """Get bcrypt hasher using the configured cost factor (singleton)."""
    return BcryptPasswordHasher(rounds=get_settings().bcrypt_cost)


def get_registration_service(request: Request) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the repository, email sender and password hasher.
    """
    return RegistrationService(
        repository=get_repository(request),
        email_sender=get_email_sender(),
        password_hasher=get_password_hasher(),
        token_length=get_settings().activation_token_length,
    )


def get_locale(accept_language: str | None = Header(default=None)) -> str:
    """Resolve the response locale from the Accept-Language header."""
    return resolve_locale(accept_language, default=get_settings().default_locale)
