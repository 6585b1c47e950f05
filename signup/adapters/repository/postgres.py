"""
PostgreSQL repository adapter - Implements UserRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Uniqueness
----------
The ``users.email`` column carries a UNIQUE constraint. ``add_user`` uses
``INSERT ... ON CONFLICT (email) DO NOTHING`` so that concurrent
registrations for one email resolve atomically in the database: exactly
one insert returns a row, the others return nothing and are reported to
the domain as ``None``.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from psycopg_pool import ConnectionPool

from signup.domain.ports import User

logger = logging.getLogger(__name__)

_USER_COLUMNS = "id, username, email, password, activation_token, inactive"


def _row_to_user(row: tuple) -> User:
    return User(
        id=row[0],
        username=row[1],
        email=row[2],
        password=row[3],
        activation_token=row[4],
        inactive=row[5],
    )


class PostgresUserRepository:
    """
    Implements UserRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def find_by_email(self, email: str) -> User | None:
        """
        Look up a user by exact email.

        Comparison is the column's default (case-sensitive) equality.
        """
        sql = f"SELECT {_USER_COLUMNS} FROM users WHERE email = %s"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (email,))
            row = cursor.fetchone()
            conn.commit()

        return _row_to_user(row) if row is not None else None

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

        ``inactive`` is always written as TRUE; there is no parameter for it.
        ``before_commit`` runs while the new row is still uncommitted; an
        exception from it rolls the insert back and is re-raised.

        Args:
            username: Validated username
            email: Validated email address
            password_hash: bcrypt hash from the domain layer
            activation_token: Random activation token
            before_commit: Optional hook run before commit

        Returns:
            The created user, or None if the email is already taken
        """
        sql = f"""
            INSERT INTO users (username, email, password, activation_token, inactive, created_at)
            VALUES (%s, %s, %s, %s, TRUE, NOW())
            ON CONFLICT (email) DO NOTHING
            RETURNING {_USER_COLUMNS}
        """

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (username, email, password_hash, activation_token))
            row = cursor.fetchone()
            if row is None:
                conn.rollback()
                return None

            user = _row_to_user(row)
            if before_commit is not None:
                try:
                    before_commit(user)
                except Exception:
                    conn.rollback()
                    raise
            conn.commit()
            return user


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: signup/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)
                conn.commit()

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
