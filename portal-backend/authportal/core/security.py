# File: authportal/core/security.py

"""
Password hashing helpers.

Hashes are salted bcrypt strings. Only the hash is ever persisted; the
plaintext lives just long enough to be hashed.
"""

from typing import Optional

import bcrypt

from authportal.core.config import get_settings

# bcrypt only reads the first 72 bytes of a password.
BCRYPT_MAX_PASSWORD_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """
    Return a salted bcrypt hash of ``password``.

    ``rounds`` is the bcrypt cost factor; it defaults to the configured
    ``bcrypt_rounds``.
    """
    salt = bcrypt.gensalt(rounds=rounds or get_settings().bcrypt_rounds)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check ``password`` against a hash produced by :func:`hash_password`."""
    return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
