"""Seed data loaded into a fresh application.

The admin password is "password"; its bcrypt hash is stored precomputed so
startup does not pay the hashing cost.
"""

from ..auth.schemas import UserRecord
from ..items.schemas import Item

ADMIN_PASSWORD_HASH = "$2a$10$92IXUNpkjO0rOQ5byMi.Ye4oKoEa3Ro9llC/.og/at2.uheWG/igi"


def seed_users() -> list[UserRecord]:
    """Fixed user set (there is no registration endpoint)."""
    return [
        UserRecord(
            id=1,
            username="admin",
            email="admin@test.com",
            password_hash=ADMIN_PASSWORD_HASH,
        ),
    ]


def seed_items() -> list[Item]:
    """Sample items owned by the admin user."""
    return [
        Item(
            id=1,
            title="Learn Testing",
            description="Study automated testing",
            completed=False,
            owner_id=1,
        ),
        Item(
            id=2,
            title="Build API",
            description="Create REST API",
            completed=True,
            owner_id=1,
        ),
    ]
