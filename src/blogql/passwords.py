"""
Password hashing for stored user credentials.

Hashes are Argon2id strings produced by argon2-cffi; the cost parameters
come from settings and are embedded in each hash.
"""

from argon2 import PasswordHasher

from .config import Settings, settings


def get_password_hasher(current: Settings | None = None) -> PasswordHasher:
    current = current or settings
    return PasswordHasher(
        time_cost=current.password_hash_time_cost,
        memory_cost=current.password_hash_memory_cost,
        parallelism=current.password_hash_parallelism,
    )


def hash_password(password: str, hasher: PasswordHasher | None = None) -> str:
    """Hash a password. CPU bound: async callers run it in an executor."""
    return (hasher or get_password_hasher()).hash(password)
