"""
In-memory repository adapter - Implements UserRepository protocol.

Stores users in a dict keyed by email. A lock makes the check-and-reserve
step atomic, standing in for the database UNIQUE constraint. Intended for
tests and local runs without PostgreSQL.
"""

import threading
from collections.abc import Callable

from signup.domain.ports import User


class InMemoryUserRepository:
    """
    Simple in-memory user store with the same contract as the Postgres adapter.

    ``add_user`` reserves the email under the lock, then runs
    ``before_commit`` without holding it, so a slow email send does not
    block other requests. A reserved email is invisible to
    ``find_by_email`` until it is stored, like an uncommitted row.
    """

    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._reserved: set[str] = set()
        self._next_id = 1
        self._lock = threading.Lock()

    def find_by_email(self, email: str) -> User | None:
        with self._lock:
            return self._users.get(email)

    def add_user(
        self,
        username: str,
        email: str,
        password_hash: str,
        activation_token: str,
        before_commit: Callable[[User], None] | None = None,
    ) -> User | None:
        with self._lock:
            if email in self._users or email in self._reserved:
                return None
            self._reserved.add(email)
            user_id = self._next_id
            self._next_id += 1

        user = User(
            id=user_id,
            username=username,
            email=email,
            password=password_hash,
            activation_token=activation_token,
            inactive=True,
        )
        try:
            if before_commit is not None:
                before_commit(user)
        except Exception:
            with self._lock:
                self._reserved.discard(email)
            raise

        with self._lock:
            self._reserved.discard(email)
            self._users[email] = user
        return user

    def all(self) -> list[User]:
        """Return every stored user in insertion order."""
        with self._lock:
            return list(self._users.values())
