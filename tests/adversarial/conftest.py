"""
Shared fixtures for adversarial tests.

Provides common test infrastructure for concurrent registration attacks.
"""

from collections.abc import Generator

import pytest
from psycopg_pool import ConnectionPool

from signup.adapters.repository.postgres import PostgresUserRepository

pytestmark = pytest.mark.adversarial


@pytest.fixture
def pg_repository(pool: ConnectionPool) -> PostgresUserRepository:
    """Create repository instance for each test."""
    return PostgresUserRepository(pool)


@pytest.fixture(autouse=True)
def clean_database(pool: ConnectionPool) -> Generator[None, None, None]:
    """Clean users table before each test."""
    with pool.connection() as conn:
        conn.execute("DELETE FROM users")
        conn.commit()
    yield
