# File: authportal/services/auth_service.py

"""
Account registration.

This is the whole of the "auth" logic: there is no session issuance and no
password verification path. A registration either creates exactly one user
or raises a ``RegistrationError`` without touching storage.
"""

import logging
from typing import Optional

from authportal.core.security import hash_password
from authportal.models.user import User
from authportal.repository.user_repository import UserRepository
from authportal.services.errors import MissingCredentialsError, UserAlreadyExistsError

logger = logging.getLogger(__name__)


def register_user(
    repository: UserRepository,
    *,
    email: Optional[str],
    password: Optional[str],
    rounds: Optional[int] = None,
) -> User:
    """
    Register a new account for ``email``.

    Raises:
      - MissingCredentialsError if either field is missing or empty
      - UserAlreadyExistsError if ``email`` already has an account
    Anything else (storage down, hashing failure) propagates unchanged.
    """
    if not email or not password:
        raise MissingCredentialsError()

    if repository.find_by_email(email) is not None:
        logger.info("Registration rejected, %s already exists", email)
        raise UserAlreadyExistsError()

    password_hash = hash_password(password, rounds=rounds)
    user = repository.create_user(email=email, password_hash=password_hash)

    logger.info("Registered user %s", email)
    return user
