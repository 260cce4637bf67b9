# File: authportal/services/errors.py

"""
Registration failures.

Each error carries the HTTP status and the user-facing message the API
answers with, so routes can map them without knowing every subclass.
"""

from fastapi import status


class RegistrationError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingCredentialsError(RegistrationError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "All fields required"


class UserAlreadyExistsError(RegistrationError):
    status_code = status.HTTP_409_CONFLICT
    message = "User already exists"
