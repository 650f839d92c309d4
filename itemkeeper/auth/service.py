"""Credential store and password hashing.

Users are held in memory, keyed by username. The store is populated once at
startup and read-only afterwards, so lookups need no locking.
"""

import logging
from collections.abc import Iterable
from functools import cached_property

import bcrypt

from .schemas import UserRecord, UserResponse

logger = logging.getLogger(__name__)


# ============================================================================
# Password Hashing
# ============================================================================


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with bcrypt using ``rounds`` as the work factor."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check ``password`` against a bcrypt hash ($2a$ and $2b$ both accepted)."""
    if not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed hash, or password longer than bcrypt accepts
        return False


# ============================================================================
# Credential Store
# ============================================================================


class CredentialStore:
    """In-memory user records."""

    def __init__(self, users: Iterable[UserRecord] = (), work_factor: int = 12):
        self._by_username: dict[str, UserRecord] = {}
        self._work_factor = work_factor
        for user in users:
            self.add(user)

    def __len__(self) -> int:
        return len(self._by_username)

    @cached_property
    def _dummy_hash(self) -> str:
        # Compared against when the username is unknown
        return hash_password("not-a-real-password", rounds=self._work_factor)

    def add(self, user: UserRecord) -> UserRecord:
        """
        Add a user record.

        Raises:
            ValueError: If the username or id is already taken
        """
        if user.username in self._by_username:
            raise ValueError(f"Username already exists: {user.username}")
        if self.get_by_id(user.id) is not None:
            raise ValueError(f"User id already exists: {user.id}")
        self._by_username[user.username] = user
        return user

    def create_user(self, username: str, password: str, email: str) -> UserRecord:
        """Hash ``password`` and add a user with the next free id."""
        next_id = max((u.id for u in self._by_username.values()), default=0) + 1
        user = UserRecord(
            id=next_id,
            username=username,
            email=email,
            password_hash=hash_password(password, rounds=self._work_factor),
        )
        return self.add(user)

    def get_by_username(self, username: str) -> UserRecord | None:
        return self._by_username.get(username)

    def get_by_id(self, user_id: int) -> UserRecord | None:
        for user in self._by_username.values():
            if user.id == user_id:
                return user
        return None

    def verify_credentials(self, username: str, password: str) -> UserResponse | None:
        """
        Verify username and password.

        Unknown usernames are still run through a bcrypt comparison so that
        both failure paths cost the same.

        Returns:
            Public user view if the credentials match, else None
        """
        user = self.get_by_username(username)
        if user is None:
            verify_password(password, self._dummy_hash)
            return None

        if not verify_password(password, user.password_hash):
            return None

        return user.public()
