"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A valid signup submission
- In-memory repository and fast password hasher
- A registration service wired with a mocked email sender
- A PostgreSQL connection pool for integration and adversarial tests
"""

from collections.abc import Generator
from unittest.mock import Mock

import pytest
from psycopg_pool import ConnectionPool, PoolTimeout

from signup.adapters.hashing import BcryptPasswordHasher
from signup.adapters.repository.memory import InMemoryUserRepository
from signup.adapters.repository.postgres import run_migrations
from signup.config.settings import get_settings
from signup.domain.registration import RegistrationService

VALID_USER = {
    "username": "user1",
    "email": "user1@mail.com",
    "password": "P4ssword",
}


@pytest.fixture
def valid_user() -> dict[str, str]:
    """A signup body that passes every rule."""
    return dict(VALID_USER)


@pytest.fixture
def repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def email_sender() -> Mock:
    return Mock()


@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    """bcrypt at the minimum cost factor to keep tests fast."""
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def service(
    repository: InMemoryUserRepository,
    email_sender: Mock,
    password_hasher: BcryptPasswordHasher,
) -> RegistrationService:
    return RegistrationService(
        repository=repository,
        email_sender=email_sender,
        password_hasher=password_hasher,
    )


@pytest.fixture(scope="session")
def pool() -> Generator[ConnectionPool, None, None]:
    """
    Connection pool for tests that need PostgreSQL.

    Applies migrations once; skips the requesting test when the
    database configured by DATABASE_URL cannot be reached.
    """
    settings = get_settings()
    pool = ConnectionPool(conninfo=settings.database_url, min_size=1, max_size=10, open=False)
    try:
        pool.open(wait=True, timeout=3.0)
    except PoolTimeout:
        pool.close()
        pytest.skip("PostgreSQL is not available")
    run_migrations(pool)
    yield pool
    pool.close()
